"""Token classification and highlighting for the px2 stack language."""

from __future__ import annotations

from px2syntax.classifier import classify
from px2syntax.rules import DEFAULT_TABLE, Category, CategoryTable
from px2syntax.styles import DEFAULT_BINDING, StyleBinding, style_for

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_BINDING",
    "DEFAULT_TABLE",
    "Category",
    "CategoryTable",
    "StyleBinding",
    "classify",
    "highlight",
    "style_for",
]


def highlight(
    source: str,
    table: CategoryTable = DEFAULT_TABLE,
    binding: StyleBinding = DEFAULT_BINDING,
) -> list[tuple[str, str | None]]:
    """Scan *source* and return ``(text, role)`` for every token."""
    from px2syntax.lexer import tokenize

    return [(tok.text, style_for(classify(tok.text, table), binding)) for tok in tokenize(source)]
