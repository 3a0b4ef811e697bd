from __future__ import annotations

import json
import sys
from datetime import datetime, timezone

from .context import RunContext

# minimum -v count needed for a level to be written
_LEVEL_VERBOSITY = {"error": 0, "warn": 0, "info": 0, "debug": 1, "trace": 3}


def log_enabled(ctx: RunContext, level: str) -> bool:
    if level in {"error", "warn"}:
        return True
    if ctx.quiet:
        return False
    return ctx.verbosity >= _LEVEL_VERBOSITY.get(level, 0)


def log_event(ctx: RunContext, level: str, component: str, action: str, **fields: object) -> None:
    if not log_enabled(ctx, level):
        return
    payload = {
        "ts": datetime.now(timezone.utc).isoformat(),
        "level": level,
        "run_id": ctx.run_id,
        "component": component,
        "action": action,
        **fields,
    }
    if ctx.log_json:
        sys.stderr.write(json.dumps(payload, sort_keys=True, default=str) + "\n")
        return
    core = f"ts={payload['ts']} level={level} run_id={ctx.run_id} component={component} action={action}"
    extras = " ".join(f"{key}={value}" for key, value in sorted(fields.items()))
    sys.stderr.write((core if not extras else f"{core} {extras}") + "\n")
