"""MAINTAINERS parsing and path ownership resolution."""

from __future__ import annotations

from .matcher import match_pattern
from .model import FilePattern, MaintainerEntry, MaintainerId, OwnershipFile
from .parser import parse_maintainers, read_maintainers_file
from .resolver import entry_owns, owner_ids, resolve_owners

__all__ = [
    "FilePattern",
    "MaintainerEntry",
    "MaintainerId",
    "OwnershipFile",
    "entry_owns",
    "match_pattern",
    "owner_ids",
    "parse_maintainers",
    "read_maintainers_file",
    "resolve_owners",
]
