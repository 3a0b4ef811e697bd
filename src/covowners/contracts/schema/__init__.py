from __future__ import annotations

from .validate import schema_path_for, validate

__all__ = ["schema_path_for", "validate"]
