"""Packaged JSON schemas: the Coverity export, the config file, and the report payload."""

from __future__ import annotations

from importlib import resources
from pathlib import Path

SUFFIX = ".schema.json"


def schemas_root() -> Path:
    return Path(str(resources.files(__package__)))


def schema_names() -> tuple[str, ...]:
    """Names accepted by `validate`, e.g. `covowners.report.v1`."""
    return tuple(sorted(p.name[: -len(SUFFIX)] for p in schemas_root().glob(f"*{SUFFIX}")))
