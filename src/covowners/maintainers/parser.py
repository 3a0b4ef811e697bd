"""MAINTAINERS text parser.

The format is line oriented. A line starting with non-whitespace opens an
entry (its title); `X: value` lines fill the open entry. Everything before the
second title line is the preamble, which conventionally documents the field
letters themselves.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterator

from ..errors import input_unreadable, malformed_ownership_entry
from .model import FilePattern, MaintainerEntry, OwnershipFile

_FIELD_RE = re.compile(r"^(?P<type>[A-Z]+):\s+(?P<text>.*)$")
_TITLE_RE = re.compile(r"^\S")


@dataclass
class _EntryBuilder:
    title: str
    short_name: str = ""
    maintainers: list[str] = field(default_factory=list)
    patterns: list[FilePattern] = field(default_factory=list)
    comments: list[str] = field(default_factory=list)
    feature_tag: str = ""

    def add_maintainer(self, text: str) -> None:
        self.maintainers.append(text)

    def add_include(self, text: str) -> None:
        self.patterns.append(FilePattern.include(text))

    def add_exclude(self, text: str) -> None:
        self.patterns.append(FilePattern.exclude(text))

    def add_comment(self, text: str) -> None:
        self.comments.append(text)

    def set_short_name(self, text: str) -> None:
        self.short_name = text

    def set_feature_tag(self, text: str) -> None:
        self.feature_tag = text

    def apply(self, tag: str, text: str, lineno: int) -> None:
        handler = FIELD_TYPES.get(tag)
        if handler is None:
            raise malformed_ownership_entry(lineno, tag, self.title)
        handler(self, text)

    def freeze(self) -> MaintainerEntry:
        return MaintainerEntry(
            title=self.title,
            short_name=self.short_name,
            maintainers=tuple(self.maintainers),
            patterns=tuple(self.patterns),
            comments=tuple(self.comments),
            feature_tag=self.feature_tag,
        )


# field tag -> how its text lands in the open entry
FIELD_TYPES: dict[str, Callable[[_EntryBuilder, str], None]] = {
    "M": _EntryBuilder.add_maintainer,
    "F": _EntryBuilder.add_include,
    "E": _EntryBuilder.add_exclude,
    "C": _EntryBuilder.add_comment,
    "I": _EntryBuilder.set_short_name,
    "Y": _EntryBuilder.set_feature_tag,
}


@dataclass
class _ParserState:
    in_intro: bool = True
    intro_title: str = ""
    preamble: list[str] = field(default_factory=list)
    entries: list[MaintainerEntry] = field(default_factory=list)
    current: _EntryBuilder | None = None

    def open_entry(self, title: str) -> None:
        self.close_entry()
        self.current = _EntryBuilder(title=title)

    def close_entry(self) -> None:
        if self.current is not None:
            self.entries.append(self.current.freeze())
            self.current = None

    def finish(self) -> OwnershipFile:
        self.close_entry()
        return OwnershipFile(
            intro_title=self.intro_title,
            preamble=tuple(self.preamble),
            entries=tuple(self.entries),
        )


def _split_lines(text: str) -> Iterator[str]:
    # only "\n" ends a line; form feeds, unicode separators and lone "\r" stay in the text
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    for line in lines:
        yield line[:-1] if line.endswith("\r") else line


def parse_maintainers(text: str) -> OwnershipFile:
    state = _ParserState()
    for lineno, line in enumerate(_split_lines(text), start=1):
        m = _FIELD_RE.match(line)
        if m:
            # field lines before the first entry are dropped, whatever their type
            if state.current is not None:
                state.current.apply(m.group("type"), m.group("text"), lineno)
            continue
        if _TITLE_RE.match(line):
            if not state.in_intro:
                state.open_entry(line)
            elif not state.intro_title:
                state.intro_title = line
                state.preamble.append(line)
            else:
                state.in_intro = False
                state.open_entry(line)
            continue
        if state.in_intro:
            state.preamble.append(line)
    return state.finish()


def read_maintainers_file(path: Path) -> OwnershipFile:
    try:
        # bytes, so newline translation cannot turn a lone "\r" into a line break
        text = Path(path).read_bytes().decode("utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise input_unreadable("maintainers file", path, exc) from exc
    return parse_maintainers(text)
