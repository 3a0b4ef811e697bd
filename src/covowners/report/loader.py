from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from ..contracts.schema import validate
from ..errors import MALFORMED_REPORT, input_unreadable, malformed_report
from ..exit_codes import ERR_VALIDATION
from .model import DefectRecord, DefectReport, ReportColumn

REPORT_SCHEMA = "coverity.view-contents.v1"


def parse_report(payload: Any, source: str = "defect report") -> DefectReport:
    validate(REPORT_SCHEMA, payload, code=ERR_VALIDATION, kind=MALFORMED_REPORT, subject=source)
    body = payload["viewContentsV1"]
    return DefectReport(
        offset=int(body["offset"]),
        total_rows=int(body["totalRows"]),
        columns=tuple(ReportColumn(name=str(c["name"]), label=str(c["label"])) for c in body["columns"]),
        rows=tuple(DefectRecord.from_row(row) for row in body["rows"]),
    )


def read_report_text(path: Path) -> str:
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise input_unreadable("defect report", path, exc) from exc


def load_report(path: Path) -> DefectReport:
    text = read_report_text(path)
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise malformed_report(f"defect report {path} is not valid JSON: {exc}") from exc
    return parse_report(payload, source=str(path))
