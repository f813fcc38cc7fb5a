"""Classify tokens against a CategoryTable."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from px2syntax.rules import DEFAULT_TABLE, Category, CategoryTable
from px2syntax.tokens import Token


def classify(token_text: str, table: CategoryTable = DEFAULT_TABLE) -> Category:
    """Return the category of the first rule matching *token_text*.

    Tokens no rule matches, including the empty string, are UNCLASSIFIED.
    """
    if not token_text:
        return Category.UNCLASSIFIED
    for rule in table.rules:
        if rule.matches(token_text):
            return rule.category
    return Category.UNCLASSIFIED


def classify_tokens(
    tokens: Iterable[Token], table: CategoryTable = DEFAULT_TABLE
) -> Iterator[tuple[Token, Category]]:
    """Yield each token paired with its category."""
    for tok in tokens:
        yield tok, classify(tok.text, table)
