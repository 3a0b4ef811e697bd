from __future__ import annotations

import argparse

from ..cli.output import build_base_payload, emit
from ..config.loader import Settings
from ..core.context import RunContext
from ..core.logging import log_event
from ..exit_codes import OK
from .parser import read_maintainers_file
from .resolver import owner_ids, resolve_owners


def configure_maintainers_parsers(sub: argparse._SubParsersAction) -> None:
    owners_p = sub.add_parser("owners", help="show the MAINTAINERS entries owning each path")
    owners_p.add_argument("paths", nargs="+", help="repository-relative file paths")
    owners_p.add_argument("-m", "--maintainers-file", help="MAINTAINERS file (default: config, env, or ./MAINTAINERS)")

    dump_p = sub.add_parser("maintainers", help="print the parsed MAINTAINERS document")
    dump_p.add_argument("-m", "--maintainers-file", help="MAINTAINERS file (default: config, env, or ./MAINTAINERS)")


def run_owners_command(ctx: RunContext, ns: argparse.Namespace, settings: Settings) -> int:
    ownership = read_maintainers_file(settings.maintainers_file)
    lookups: list[dict[str, object]] = []
    for raw in ns.paths:
        path = raw[1:] if raw.startswith("/") else raw
        entries = resolve_owners(ownership, path)
        log_event(ctx, "debug", "owners", "resolved", path=path, entries=len(entries))
        lookups.append(
            {
                "path": path,
                "maintainers": owner_ids(entries),
                "entries": [e.to_dict() for e in entries],
            }
        )
    if ctx.as_json:
        payload = build_base_payload(ctx, "owners")
        payload["lookups"] = lookups
        emit(payload)
        return OK
    for row in lookups:
        print(f"{row['path']}:")
        entries = row["entries"]
        if not entries:
            print("  (no owner)")
            continue
        for entry in entries:
            label = f" [{entry['short_name']}]" if entry["short_name"] else ""
            print(f"  {entry['title']}{label}")
            for mid in entry["maintainers"]:
                print(f"    M: {mid}")
    return OK


def run_maintainers_command(ctx: RunContext, ns: argparse.Namespace, settings: Settings) -> int:
    ownership = read_maintainers_file(settings.maintainers_file)
    if ctx.as_json:
        payload = build_base_payload(ctx, "maintainers")
        payload["document"] = ownership.to_dict()
        emit(payload)
        return OK
    print(f"preamble: {len(ownership.preamble)} lines ({ownership.intro_title or 'untitled'})")
    print(f"entries: {len(ownership.entries)}")
    for entry in ownership.entries:
        label = f" [{entry.short_name}]" if entry.short_name else ""
        print(
            f"- {entry.title}{label}: {len(entry.maintainers)} maintainers, "
            f"{len(entry.includes)} includes, {len(entry.excludes)} excludes"
        )
    return OK
