from __future__ import annotations

from .loader import Settings, load_json_config, load_settings

__all__ = ["Settings", "load_json_config", "load_settings"]
