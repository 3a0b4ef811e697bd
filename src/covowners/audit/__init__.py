"""Directory tree ownership audits."""

from __future__ import annotations

from .tree import check_tree

__all__ = ["check_tree"]
