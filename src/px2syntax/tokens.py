"""Token data structures and character classification helpers."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Position:
    """Source position, 1-based line and column, 0-based character offset."""

    line: int
    column: int
    offset: int


@dataclass(frozen=True, slots=True)
class Span:
    """Source range from start to end position."""

    start: Position
    end: Position


@dataclass(frozen=True, slots=True)
class Token:
    """A single token: its raw source text and where it came from."""

    text: str
    span: Span

    @property
    def length(self) -> int:
        return self.span.end.offset - self.span.start.offset


# Single-character operators
OPERATORS = frozenset("+-*/")

# Characters the scanner skips between tokens
WHITESPACE = frozenset(" \t\r\n")


def is_digit(ch: str) -> bool:
    """Return True if ch is an ASCII decimal digit."""
    return "0" <= ch <= "9"


def is_ident_start(ch: str) -> bool:
    return ch.isalpha()


def is_ident_char(ch: str) -> bool:
    """Return True if ch may continue an identifier (ASCII alphanumeric or _)."""
    return ch.isascii() and (ch.isalnum() or ch == "_")
