from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import Any

import jsonschema

from ...errors import INTERNAL, MALFORMED_REPORT, ScriptError
from ...exit_codes import ERR_INTERNAL, ERR_VALIDATION
from .schemas import SUFFIX, schema_names, schemas_root


def schema_path_for(schema_name: str) -> Path:
    if schema_name not in schema_names():
        known = ", ".join(schema_names())
        raise ScriptError(f"unknown schema `{schema_name}` (known: {known})", ERR_INTERNAL, INTERNAL)
    return schemas_root() / f"{schema_name}{SUFFIX}"


@lru_cache(maxsize=None)
def _load_schema(schema_name: str) -> dict[str, Any]:
    return json.loads(schema_path_for(schema_name).read_text(encoding="utf-8"))


def validate(
    schema_name: str,
    payload: Any,
    *,
    code: int = ERR_VALIDATION,
    kind: str = MALFORMED_REPORT,
    subject: str | None = None,
) -> None:
    """Check `payload` against a packaged schema; the first violation becomes a `ScriptError`.

    The message names `subject` (a file path, usually) and the slash-joined
    JSON pointer of the offending value, e.g. `viewContentsV1/rows/0`.
    """
    try:
        jsonschema.validate(payload, _load_schema(schema_name))
    except jsonschema.ValidationError as exc:
        loc = "/".join(str(p) for p in exc.absolute_path) or "<root>"
        what = subject or schema_name
        raise ScriptError(f"schema validation failed for {what} at {loc}: {exc.message}", code, kind) from exc
