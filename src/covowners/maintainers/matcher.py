"""Root-anchored, component-wise path pattern matching.

Patterns compare against file paths one `/`-separated component at a time.
A pattern matches everything below it (a subtree) when it ends in `/` or when
its last component is a plain name; MAINTAINERS files routinely omit the
trailing slash on directories. A wildcard last component only matches at
exactly the same depth.
"""

from __future__ import annotations

from fnmatch import fnmatchcase

ROOT = "/"
CURDIR = "."
WILDCARD_CHARS = frozenset("*?[")


def split_components(path: str) -> tuple[str, ...]:
    """Split on `/`, dropping empty and interior `.` parts.

    A leading `/` becomes the `ROOT` component and a leading `./` stays as a
    `CURDIR` component, so neither form matches a plain relative path.
    """
    parts = tuple(p for p in path.split("/") if p and p != CURDIR)
    if path.startswith("/"):
        return (ROOT, *parts)
    if path == CURDIR or path.startswith(CURDIR + "/"):
        return (CURDIR, *parts)
    return parts


def is_wildcard(component: str) -> bool:
    return any(ch in WILDCARD_CHARS for ch in component)


def component_match(pattern_part: str, file_part: str) -> bool:
    if pattern_part == file_part:
        return True
    if {pattern_part, file_part} & {ROOT, CURDIR}:
        return False
    return is_wildcard(pattern_part) and fnmatchcase(file_part, pattern_part)


def is_subtree_pattern(pattern: str) -> bool:
    if pattern.endswith("/"):
        return True
    parts = split_components(pattern)
    return bool(parts) and not is_wildcard(parts[-1])


def match_pattern(pattern: str, file_path: str) -> bool:
    pattern_parts = split_components(pattern)
    file_parts = split_components(file_path)
    for p, f in zip(pattern_parts, file_parts):
        if not component_match(p, f):
            return False
    if len(file_parts) == len(pattern_parts):
        return True
    if len(file_parts) > len(pattern_parts):
        return is_subtree_pattern(pattern)
    return False
