"""Errors reported while running Lox code."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, TextIO


class ScanErrorKind(Enum):
    """What went wrong while scanning."""

    UNEXPECTED_CHARACTER = "Unexpected character"
    UNTERMINATED_STRING = "Unterminated string"
    UNTERMINATED_COMMENT = "Unterminated comment"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ScanningError:
    """A single scanning problem and the line it was found on."""

    kind: ScanErrorKind
    line: int

    def __str__(self) -> str:
        return f"{self.kind} error encountered on line {self.line}"


class LoxError(Exception):
    """Base class of the errors raised while running Lox code."""


class ScanError(LoxError):
    """Raised when scanning found one or more errors."""

    def __init__(self, errors: Iterable[ScanningError]) -> None:
        self.errors = list(errors)
        super().__init__("\n".join(str(error) for error in self.errors))


def format_error(error: LoxError) -> str:
    """Return the human-readable report of ``error``, one problem per line."""
    if isinstance(error, ScanError):
        return "\n".join(str(problem) for problem in error.errors)
    return str(error)


def print_error(error: LoxError, file: Optional[TextIO] = None) -> None:
    """Write the report of ``error`` to ``file`` (standard error by default)."""
    out = sys.stderr if file is None else file
    report = format_error(error)
    if report:
        print(report, file=out)