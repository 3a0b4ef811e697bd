"""CLI payload output helpers."""

from __future__ import annotations

import json
import sys
from typing import Any

from ..core.context import RunContext
from ..errors import GENERIC
from ..report.model import DefectRecord

TOOL = "covowners"
SCHEMA_VERSION = 1


def to_json(payload: Any) -> str:
    """One line, sorted keys; maintainer names keep their UTF-8 spelling."""
    return json.dumps(payload, sort_keys=True, ensure_ascii=False)


def emit(payload: dict[str, object]) -> None:
    print(to_json(payload))


def build_base_payload(ctx: RunContext, kind: str, status: str = "ok") -> dict[str, object]:
    return {
        "schema_version": SCHEMA_VERSION,
        "tool": TOOL,
        "kind": kind,
        "status": status,
        "run_id": ctx.run_id,
    }


def render_error(*, as_json: bool, message: str, code: int, kind: str = GENERIC) -> str:
    if as_json:
        return to_json(
            {
                "schema_version": SCHEMA_VERSION,
                "tool": TOOL,
                "status": "error",
                "errors": [{"code": code, "kind": kind, "message": message}],
            }
        )
    return message


def print_error(as_json: bool, message: str, code: int, kind: str = GENERIC) -> None:
    print(render_error(as_json=as_json, message=message, code=code, kind=kind), file=sys.stderr)


def defect_row(defect: DefectRecord, owners: tuple[str, ...] | None = None) -> dict[str, object]:
    row: dict[str, object] = {
        "cid": defect.cid,
        "file": defect.file_path,
        "function": defect.display_function,
        "type": defect.display_type,
        "impact": defect.display_impact,
        "severity": defect.severity,
        "status": defect.status,
        "classification": defect.classification,
        "owner": defect.owner,
    }
    if owners is not None:
        row["owners"] = list(owners)
    return row


def defect_line(defect: DefectRecord) -> str:
    return (
        f"CID {defect.cid}: {defect.display_type or 'defect'} in function {defect.display_function}, "
        f"file: {defect.file_path} [{defect.display_impact or 'n/a'}]"
    )
