from __future__ import annotations

import argparse
from pathlib import Path

from ..cli.output import build_base_payload, defect_line, defect_row, emit
from ..config.loader import Settings
from ..core.context import RunContext
from ..core.logging import log_event
from ..errors import ScriptError
from ..exit_codes import ERR_ORPHANS, OK
from ..maintainers.model import OwnershipFile
from ..maintainers.parser import read_maintainers_file
from ..report.aggregate import aggregate
from ..report.loader import load_report
from .tree import check_tree


def configure_audit_parser(sub: argparse._SubParsersAction) -> None:
    p = sub.add_parser(
        "audit",
        help="list defects or files that no MAINTAINERS entry owns",
        description=(
            "TARGET is read as a Coverity export when possible; when it cannot be read as a file "
            "it is walked as a directory tree and every unowned regular file is listed."
        ),
    )
    p.add_argument("target", help="Coverity viewContents JSON export or source tree root")
    p.add_argument("-m", "--maintainers-file", help="MAINTAINERS file (default: config, env, or ./MAINTAINERS)")
    p.add_argument(
        "--skip-dir",
        action="append",
        default=[],
        help="directory name or root-relative path not to descend into (repeatable)",
    )


def _audit_report(ctx: RunContext, target: Path, ownership: OwnershipFile) -> int:
    report = load_report(target)
    agg = aggregate(report.rows, ownership)
    log_event(ctx, "info", "audit", "report-audited", defects=len(report.rows), orphans=len(agg.orphans))
    if ctx.as_json:
        payload = build_base_payload(ctx, "audit", "ok" if not agg.orphans else "fail")
        payload["mode"] = "report"
        payload["orphans"] = [defect_row(d) for d in agg.orphans]
        emit(payload)
    else:
        for defect in agg.orphans:
            print(defect_line(defect))
    return OK if not agg.orphans else ERR_ORPHANS


def _audit_tree(ctx: RunContext, target: Path, ownership: OwnershipFile, skip_dirs: tuple[str, ...]) -> int:
    on_orphan = None if ctx.as_json else (lambda rel: print(f"Unowned file: {rel}", flush=True))
    orphans = check_tree(target, ownership, on_orphan=on_orphan, skip_dirs=skip_dirs)
    log_event(ctx, "info", "audit", "tree-audited", root=str(target), orphans=len(orphans))
    if ctx.as_json:
        payload = build_base_payload(ctx, "audit", "ok" if not orphans else "fail")
        payload["mode"] = "tree"
        payload["root"] = str(target)
        payload["orphans"] = orphans
        emit(payload)
    return OK if not orphans else ERR_ORPHANS


def run_audit_command(ctx: RunContext, ns: argparse.Namespace, settings: Settings) -> int:
    ownership = read_maintainers_file(settings.maintainers_file)
    target = Path(ns.target)
    try:
        return _audit_report(ctx, target, ownership)
    except ScriptError as exc:
        if not exc.is_unreadable_input:
            raise
        log_event(ctx, "debug", "audit", "tree-fallback", target=str(target), reason=str(exc))
    return _audit_tree(ctx, target, ownership, (*settings.skip_dirs, *ns.skip_dir))
