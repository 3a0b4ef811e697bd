from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

# report column name -> DefectRecord attribute
ROW_FIELDS = {
    "cid": "cid",
    "displayType": "display_type",
    "displayImpact": "display_impact",
    "status": "status",
    "firstDetected": "first_detected",
    "classification": "classification",
    "owner": "owner",
    "severity": "severity",
    "action": "action",
    "displayComponent": "display_component",
    "displayCategory": "display_category",
    "displayFile": "display_file",
    "displayFunction": "display_function",
}


@dataclass(frozen=True)
class DefectRecord:
    cid: int
    display_type: str = ""
    display_impact: str = ""
    status: str = ""
    first_detected: str = ""
    classification: str = ""
    owner: str = ""
    severity: str = ""
    action: str = ""
    display_component: str = ""
    display_category: str = ""
    display_file: str = ""
    display_function: str = ""

    @property
    def file_path(self) -> str:
        path = self.display_file
        return path[1:] if path.startswith("/") else path

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "DefectRecord":
        values = {attr: row[key] for key, attr in ROW_FIELDS.items() if key in row}
        return cls(**values)

    def to_dict(self) -> dict[str, object]:
        return {key: getattr(self, attr) for key, attr in ROW_FIELDS.items()}


@dataclass(frozen=True)
class ReportColumn:
    name: str
    label: str


@dataclass(frozen=True)
class DefectReport:
    offset: int
    total_rows: int
    columns: tuple[ReportColumn, ...]
    rows: tuple[DefectRecord, ...]
