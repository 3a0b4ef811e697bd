"""Typed view of a parsed MAINTAINERS document."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

MaintainerId = str
PatternKind = Literal["include", "exclude"]


@dataclass(frozen=True)
class FilePattern:
    kind: PatternKind
    pattern: str

    @classmethod
    def include(cls, pattern: str) -> "FilePattern":
        return cls("include", pattern)

    @classmethod
    def exclude(cls, pattern: str) -> "FilePattern":
        return cls("exclude", pattern)

    @property
    def is_include(self) -> bool:
        return self.kind == "include"

    def to_dict(self) -> dict[str, str]:
        return {"kind": self.kind, "pattern": self.pattern}


@dataclass(frozen=True)
class MaintainerEntry:
    """One ownership declaration: a title line plus its field lines."""

    title: str
    short_name: str = ""
    maintainers: tuple[MaintainerId, ...] = ()
    patterns: tuple[FilePattern, ...] = ()
    comments: tuple[str, ...] = ()
    feature_tag: str = ""

    @property
    def includes(self) -> tuple[str, ...]:
        return tuple(p.pattern for p in self.patterns if p.is_include)

    @property
    def excludes(self) -> tuple[str, ...]:
        return tuple(p.pattern for p in self.patterns if not p.is_include)

    def to_dict(self) -> dict[str, object]:
        return {
            "title": self.title,
            "short_name": self.short_name,
            "maintainers": list(self.maintainers),
            "patterns": [p.to_dict() for p in self.patterns],
            "comments": list(self.comments),
            "feature_tag": self.feature_tag,
        }


@dataclass(frozen=True)
class OwnershipFile:
    intro_title: str = ""
    preamble: tuple[str, ...] = ()
    entries: tuple[MaintainerEntry, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, object]:
        return {
            "intro_title": self.intro_title,
            "preamble": list(self.preamble),
            "entries": [e.to_dict() for e in self.entries],
        }
