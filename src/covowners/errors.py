"""The one user-facing exception and the failure kinds it is raised with."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .exit_codes import ERR_CONFIG, ERR_INPUT, ERR_TRAVERSAL, ERR_USAGE, ERR_VALIDATION

GENERIC = "generic_error"
INPUT_UNREADABLE = "input_unreadable"
MALFORMED_OWNERSHIP_ENTRY = "malformed_ownership_entry"
MALFORMED_REPORT = "malformed_report"
FILESYSTEM_TRAVERSAL_FAILURE = "filesystem_traversal_failure"
INVALID_CONFIG = "invalid_config"
USAGE = "usage"
INTERNAL = "internal_error"


@dataclass
class ScriptError(Exception):
    message: str
    code: int
    kind: str = GENERIC

    def __str__(self) -> str:
        return self.message

    @property
    def is_unreadable_input(self) -> bool:
        return self.kind == INPUT_UNREADABLE


def input_unreadable(what: str, path: str | Path, exc: Exception) -> ScriptError:
    return ScriptError(f"cannot read {what} {path}: {exc}", ERR_INPUT, INPUT_UNREADABLE)


def malformed_ownership_entry(lineno: int, tag: str, title: str) -> ScriptError:
    return ScriptError(
        f"line {lineno}: field type `{tag}` is not handled in entry `{title}`",
        ERR_VALIDATION,
        MALFORMED_OWNERSHIP_ENTRY,
    )


def malformed_report(message: str) -> ScriptError:
    return ScriptError(message, ERR_VALIDATION, MALFORMED_REPORT)


def traversal_failure(action: str, path: str | Path, exc: Exception) -> ScriptError:
    return ScriptError(f"cannot {action} {path}: {exc}", ERR_TRAVERSAL, FILESYSTEM_TRAVERSAL_FAILURE)


def invalid_config(message: str) -> ScriptError:
    return ScriptError(message, ERR_CONFIG, INVALID_CONFIG)


def usage_error(message: str) -> ScriptError:
    return ScriptError(message, ERR_USAGE, USAGE)
