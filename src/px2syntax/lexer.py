"""px2 scanner — splits source text into a flat token stream.

Scanning never fails: characters the language has no use for become
one-character tokens, which the classifier leaves unclassified.
"""

from __future__ import annotations

from px2syntax.tokens import (
    OPERATORS,
    WHITESPACE,
    Position,
    Span,
    Token,
    is_digit,
    is_ident_char,
    is_ident_start,
)


class Scanner:
    """Tokenize px2 source text into a list of Token objects."""

    def __init__(self, source: str) -> None:
        self._source = source
        self._pos = 0
        self._line = 1
        self._col = 1
        self._tokens: list[Token] = []

    def tokenize(self) -> list[Token]:
        """Scan the full source and return the token list."""
        while True:
            self._skip_whitespace()
            if self._pos >= len(self._source):
                break
            self._scan_token()
        return self._tokens

    # ------------------------------------------------------------------
    # Position helpers
    # ------------------------------------------------------------------

    def _current_pos(self) -> Position:
        return Position(self._line, self._col, self._pos)

    def _peek(self) -> str:
        if self._pos < len(self._source):
            return self._source[self._pos]
        return ""

    def _advance(self) -> str:
        ch = self._source[self._pos]
        self._pos += 1
        if ch == "\n" or (ch == "\r" and self._peek() != "\n"):
            self._line += 1
            self._col = 1
        else:
            self._col += 1
        return ch

    def _emit(self, start: Position) -> Token:
        text = self._source[start.offset : self._pos]
        tok = Token(text, Span(start, self._current_pos()))
        self._tokens.append(tok)
        return tok

    # ------------------------------------------------------------------
    # Scanning
    # ------------------------------------------------------------------

    def _skip_whitespace(self) -> None:
        while self._peek() and self._peek() in WHITESPACE:
            self._advance()

    def _scan_token(self) -> None:
        start = self._current_pos()
        ch = self._advance()

        if is_digit(ch):
            while is_digit(self._peek()):
                self._advance()
        elif is_ident_start(ch):
            while self._peek() and is_ident_char(self._peek()):
                self._advance()
        elif ch in OPERATORS:
            pass
        # Anything else stands alone as a one-character token

        self._emit(start)


def tokenize(source: str) -> list[Token]:
    """Convenience wrapper: scan *source* and return its tokens."""
    return Scanner(source).tokenize()
