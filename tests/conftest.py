"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from px2syntax.lexer import tokenize
from px2syntax.rules import Category
from px2syntax.session import SessionState
from px2syntax.tokens import Token


@pytest.fixture
def lex():
    """Return a helper that tokenizes source and returns the token list."""

    def _lex(source: str) -> list[Token]:
        return tokenize(source)

    return _lex


@pytest.fixture
def session() -> SessionState:
    """A freshly opened, uninitialized buffer session."""
    return SessionState()


def assert_texts(tokens: list[Token], expected: list[str]) -> None:
    """Assert that the token texts match the expected list."""
    actual = [t.text for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def assert_categories(pairs: list[tuple[Token, Category]], expected: list[Category]) -> None:
    """Assert that classified (token, category) pairs carry the expected categories."""
    actual = [c for _, c in pairs]
    assert actual == expected, f"Expected {expected}, got {actual}"
