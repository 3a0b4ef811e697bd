from __future__ import annotations

import json
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

from ..contracts.schema import validate
from ..errors import INVALID_CONFIG, invalid_config
from ..exit_codes import ERR_CONFIG
from ..report.aggregate import DEFAULT_LIST_MARKERS

CONFIG_SCHEMA = "covowners.config.v1"
ENV_CONFIG = "COVOWNERS_CONFIG"
ENV_MAINTAINERS_FILE = "COVOWNERS_MAINTAINERS_FILE"


@dataclass(frozen=True)
class Settings:
    maintainers_file: Path = Path("MAINTAINERS")
    list_markers: tuple[str, ...] = DEFAULT_LIST_MARKERS
    skip_dirs: tuple[str, ...] = ()


def load_json_config(path: Path) -> dict[str, Any]:
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise invalid_config(f"cannot read config file {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise invalid_config(f"config file {path} is not valid JSON: {exc}") from exc
    validate(CONFIG_SCHEMA, payload, code=ERR_CONFIG, kind=INVALID_CONFIG, subject=str(path))
    return payload


def load_settings(config_path: str | Path | None = None, maintainers_file: str | Path | None = None) -> Settings:
    """Resolve settings: explicit argument, then environment, then config file, then defaults."""
    settings = Settings()
    raw_path = config_path or os.environ.get(ENV_CONFIG)
    if raw_path:
        path = Path(raw_path)
        payload = load_json_config(path)
        if "maintainers_file" in payload:
            mf = Path(payload["maintainers_file"])
            # relative paths in a config file are relative to that file
            settings = replace(settings, maintainers_file=mf if mf.is_absolute() else path.parent / mf)
        if "list_markers" in payload:
            settings = replace(settings, list_markers=tuple(payload["list_markers"]))
        if "skip_dirs" in payload:
            settings = replace(settings, skip_dirs=tuple(payload["skip_dirs"]))
    env_mf = os.environ.get(ENV_MAINTAINERS_FILE)
    if env_mf:
        settings = replace(settings, maintainers_file=Path(env_mf))
    if maintainers_file:
        settings = replace(settings, maintainers_file=Path(maintainers_file))
    return settings
