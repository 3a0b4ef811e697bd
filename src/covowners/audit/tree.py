from __future__ import annotations

import os
from pathlib import Path
from typing import Callable, Iterable, Iterator

from ..errors import traversal_failure, usage_error
from ..maintainers.model import OwnershipFile
from ..maintainers.resolver import resolve_owners

OrphanCallback = Callable[[str], None]


def _listing(path: Path) -> Iterator[os.DirEntry[str]]:
    try:
        with os.scandir(path) as it:
            entries = sorted(it, key=lambda e: e.name)
    except OSError as exc:
        raise traversal_failure("list directory", path, exc) from exc
    return iter(entries)


def check_tree(
    real_root: str | Path,
    ownership: OwnershipFile,
    current_dir: str | Path | None = None,
    on_orphan: OrphanCallback | None = None,
    skip_dirs: Iterable[str] = (),
) -> list[str]:
    """Walk `current_dir` (default: `real_root`) and return files no entry owns.

    Paths are reported relative to `real_root` in POSIX form, depth first in
    name order. `on_orphan` sees each orphan as soon as it is found. Symlinks
    and special files are skipped; any listing or stat failure aborts the walk.
    """
    root = Path(real_root)
    start = Path(current_dir) if current_dir is not None else root
    if start != root and root not in start.parents:
        raise usage_error(f"{start} is not inside {root}")
    skip = set(skip_dirs)
    orphans: list[str] = []
    stack = [_listing(start)]
    while stack:
        entry = next(stack[-1], None)
        if entry is None:
            stack.pop()
            continue
        try:
            is_file = entry.is_file(follow_symlinks=False)
            is_dir = entry.is_dir(follow_symlinks=False)
        except OSError as exc:
            raise traversal_failure("stat", entry.path, exc) from exc
        rel = Path(entry.path).relative_to(root).as_posix()
        if is_file:
            if not resolve_owners(ownership, rel):
                orphans.append(rel)
                if on_orphan is not None:
                    on_orphan(rel)
        elif is_dir:
            if entry.name in skip or rel in skip:
                continue
            stack.append(_listing(Path(entry.path)))
    return orphans
