from __future__ import annotations

import argparse
from pathlib import Path

from ..cli.output import build_base_payload, defect_line, defect_row, emit, to_json
from ..config.loader import Settings
from ..core.context import RunContext
from ..core.logging import log_enabled, log_event
from ..exit_codes import OK
from ..maintainers.parser import read_maintainers_file
from .aggregate import Aggregation, aggregate, build_roster
from .loader import load_report


def configure_report_parser(sub: argparse._SubParsersAction) -> None:
    p = sub.add_parser("report", help="attribute defects of a Coverity export to maintainers")
    p.add_argument("-i", "--in-file", required=True, help="Coverity viewContents JSON export")
    p.add_argument("-m", "--maintainers-file", help="MAINTAINERS file (default: config, env, or ./MAINTAINERS)")
    p.add_argument(
        "--person",
        action="append",
        default=[],
        help="only list defects owned by maintainers whose id contains this text (repeatable)",
    )
    p.add_argument(
        "--component",
        action="append",
        default=[],
        help="only list defects owned by the entry with this short name (repeatable)",
    )
    p.add_argument("--emails", action="store_true", help="also print the maintainer roster for notification")


def report_payload(ctx: RunContext, agg: Aggregation, roster: list[str] | None) -> dict[str, object]:
    payload = build_base_payload(ctx, "report")
    if agg.filtered:
        payload["mode"] = "query"
        payload["filters"] = {"persons": list(agg.persons), "components": list(agg.components)}
        payload["matches"] = [defect_row(d, agg.owners_by_cid.get(d.cid, ())) for d in agg.query_matches]
        return payload
    payload["mode"] = "grouped"
    payload["groups"] = [
        {"maintainer": mid, "defects": [defect_row(d, agg.owners_by_cid.get(d.cid, ())) for d in defects]}
        for mid, defects in agg.groups.items()
    ]
    if roster is not None:
        payload["roster"] = roster
    return payload


def _print_text(agg: Aggregation, roster: list[str] | None) -> None:
    if agg.filtered:
        for defect in agg.query_matches:
            print(defect_line(defect))
        return
    for mid, defects in agg.groups.items():
        print(f"{mid}:")
        for defect in defects:
            print(f"  {defect_line(defect)}")
        print()
    if roster is not None:
        print(", ".join(roster))


def run_report_command(ctx: RunContext, ns: argparse.Namespace, settings: Settings) -> int:
    ownership = read_maintainers_file(settings.maintainers_file)
    log_event(ctx, "debug", "report", "maintainers-loaded", path=str(settings.maintainers_file), entries=len(ownership.entries))
    if log_enabled(ctx, "trace"):
        log_event(ctx, "trace", "report", "maintainers-dump", document=to_json(ownership.to_dict()))
    report = load_report(Path(ns.in_file))
    log_event(ctx, "debug", "report", "report-loaded", path=ns.in_file, rows=len(report.rows), total_rows=report.total_rows)
    agg = aggregate(report.rows, ownership, persons=ns.person, components=ns.component)
    roster = build_roster(agg.groups, settings.list_markers) if ns.emails and not agg.filtered else None
    log_event(
        ctx,
        "info",
        "report",
        "aggregated",
        defects=len(report.rows),
        maintainers=len(agg.groups),
        orphans=len(agg.orphans),
        matches=len(agg.query_matches),
    )
    if ctx.as_json:
        emit(report_payload(ctx, agg, roster))
    else:
        _print_text(agg, roster)
    return OK
