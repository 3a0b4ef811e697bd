from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Literal

OutputFormat = Literal["text", "json"]


def make_run_id(prefix: str = "covowners") -> str:
    return f"{prefix}-{datetime.now(timezone.utc).strftime('%Y%m%d-%H%M%S')}"


@dataclass(frozen=True)
class RunContext:
    run_id: str
    output_format: OutputFormat
    verbosity: int
    quiet: bool
    log_json: bool

    @property
    def as_json(self) -> bool:
        return self.output_format == "json"

    @classmethod
    def from_args(
        cls,
        run_id: str | None = None,
        output_format: OutputFormat | None = None,
        verbosity: int = 0,
        quiet: bool = False,
        log_json: bool = False,
    ) -> "RunContext":
        resolved_format: OutputFormat = output_format or ("json" if "CI" in os.environ else "text")
        return cls(
            run_id=run_id or os.environ.get("RUN_ID") or make_run_id(),
            output_format=resolved_format,
            verbosity=verbosity,
            quiet=quiet,
            log_json=log_json,
        )
