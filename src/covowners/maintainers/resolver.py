from __future__ import annotations

from typing import Iterable

from .matcher import match_pattern
from .model import MaintainerEntry, OwnershipFile


def entry_owns(entry: MaintainerEntry, file_path: str) -> bool:
    """Return True when an include claims the path and no exclude of the entry does.

    Excludes veto entry-wide: an exclude is not tied to the include that
    admitted the path, so with overlapping includes a single exclude removes
    the path from every one of them.
    """
    included = False
    excluded = False
    for fp in entry.patterns:
        if fp.is_include:
            included = included or match_pattern(fp.pattern, file_path)
        else:
            excluded = excluded or match_pattern(fp.pattern, file_path)
    return included and not excluded


def resolve_owners(ownership: OwnershipFile, file_path: str) -> list[MaintainerEntry]:
    return [entry for entry in ownership.entries if entry_owns(entry, file_path)]


def owner_ids(entries: Iterable[MaintainerEntry]) -> list[str]:
    seen: dict[str, None] = {}
    for entry in entries:
        for mid in entry.maintainers:
            seen.setdefault(mid, None)
    return list(seen)
