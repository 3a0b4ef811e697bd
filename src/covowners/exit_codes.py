from __future__ import annotations

import json
from importlib import resources


def _load_registry() -> dict[str, int]:
    payload = json.loads(resources.files(__package__).joinpath("error-registry.json").read_text(encoding="utf-8"))
    mapping: dict[str, int] = {}
    for row in payload.get("codes", []):
        mapping[str(row["name"])] = int(row["code"])
    return mapping


_REG = _load_registry()

OK = 0
ERR_USAGE = _REG["COV_ERR_USAGE"]
ERR_CONFIG = _REG["COV_ERR_CONFIG"]
ERR_INPUT = _REG["COV_ERR_INPUT"]
ERR_VALIDATION = _REG["COV_ERR_VALIDATION"]
ERR_TRAVERSAL = _REG["COV_ERR_TRAVERSAL"]
ERR_ORPHANS = _REG["COV_ERR_ORPHANS"]
ERR_INTERNAL = _REG["COV_ERR_INTERNAL"]
