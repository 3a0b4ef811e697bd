"""Defect report loading and per-maintainer aggregation."""

from __future__ import annotations

from .aggregate import UNIDENTIFIED_OWNER, Aggregation, aggregate, build_roster
from .loader import load_report, parse_report
from .model import DefectRecord, DefectReport

__all__ = [
    "UNIDENTIFIED_OWNER",
    "Aggregation",
    "DefectRecord",
    "DefectReport",
    "aggregate",
    "build_roster",
    "load_report",
    "parse_report",
]
