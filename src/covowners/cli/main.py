from __future__ import annotations

import argparse

from .. import __version__
from ..audit.command import configure_audit_parser, run_audit_command
from ..config.loader import load_settings
from ..core.context import RunContext
from ..core.logging import log_event
from ..errors import INTERNAL, ScriptError
from ..exit_codes import ERR_INTERNAL, OK
from ..maintainers.command import configure_maintainers_parsers, run_maintainers_command, run_owners_command
from ..report.command import configure_report_parser, run_report_command
from .output import build_base_payload, emit, print_error

COMMANDS = {
    "report": run_report_command,
    "audit": run_audit_command,
    "owners": run_owners_command,
    "maintainers": run_maintainers_command,
}


def _version_string() -> str:
    return f"covowners {__version__}"


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="covowners",
        description="Attribute Coverity defects to MAINTAINERS entries and find unowned files.",
    )
    p.add_argument("--version", action="version", version=_version_string())
    p.add_argument("--json", action="store_true", help="emit JSON output")
    p.add_argument("--format", choices=["text", "json"], default=None, help="output format")
    p.add_argument("--run-id", help="run identifier stamped on logs and payloads")
    p.add_argument("--config", help="JSON config file (default: $COVOWNERS_CONFIG)")
    p.add_argument("--log-json", action="store_true", help="write structured logs to stderr as JSON")
    vg = p.add_mutually_exclusive_group()
    vg.add_argument("-v", "--verbose", action="count", default=0, help="more diagnostics; repeat for more")
    vg.add_argument("-q", "--quiet", action="store_true", help="only emit errors")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("version", help="print the tool version")
    configure_report_parser(sub)
    configure_audit_parser(sub)
    configure_maintainers_parsers(sub)
    return p


def main(argv: list[str] | None = None) -> int:
    p = build_parser()
    ns = p.parse_args(argv)
    ctx = RunContext.from_args(
        run_id=ns.run_id,
        output_format="json" if ns.json else ns.format,
        verbosity=ns.verbose,
        quiet=ns.quiet,
        log_json=ns.log_json,
    )
    try:
        log_event(ctx, "debug", "cli", "start", cmd=ns.cmd, fmt=ctx.output_format)
        if ns.cmd == "version":
            if ctx.as_json:
                payload = build_base_payload(ctx, "version")
                payload["version"] = __version__
                emit(payload)
            else:
                print(_version_string())
            return OK
        handler = COMMANDS[ns.cmd]
        settings = load_settings(ns.config, getattr(ns, "maintainers_file", None))
        return handler(ctx, ns, settings)
    except ScriptError as exc:
        log_event(ctx, "debug", "cli", "failed", cmd=ns.cmd, kind=exc.kind, code=exc.code)
        print_error(ctx.as_json, str(exc), exc.code, exc.kind)
        return exc.code
    except Exception as exc:  # pragma: no cover
        print_error(ctx.as_json, f"internal error: {exc}", ERR_INTERNAL, INTERNAL)
        return ERR_INTERNAL


if __name__ == "__main__":
    raise SystemExit(main())
