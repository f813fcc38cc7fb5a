"""Token categories and the rule table that recognises them.

A table is an ordered tuple of rules. Exact-set rules always come before
pattern rules, so a word listed in a set can never be claimed by a pattern;
within each kind the declared order is kept.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum


class Category(Enum):
    KEYWORD = "Keyword"
    BOOLEAN_LITERAL = "BooleanLiteral"
    NUMERIC_LITERAL = "NumericLiteral"
    UNCLASSIFIED = "Unclassified"


@dataclass(frozen=True, slots=True)
class ExactSet:
    """Rule matching a finite set of exact, case-sensitive strings."""

    category: Category
    words: frozenset[str]

    def matches(self, text: str) -> bool:
        return text in self.words


@dataclass(frozen=True, slots=True)
class Pattern:
    """Rule matching tokens whose whole text fits a regular expression."""

    category: Category
    regex: re.Pattern[str]

    def matches(self, text: str) -> bool:
        return self.regex.fullmatch(text) is not None


Rule = ExactSet | Pattern


@dataclass(frozen=True, slots=True)
class CategoryTable:
    """Immutable, ordered collection of category rules."""

    rules: tuple[Rule, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        for rule in self.rules:
            if rule.category is Category.UNCLASSIFIED:
                raise ValueError("Unclassified cannot have a rule")
        exact = tuple(r for r in self.rules if isinstance(r, ExactSet))
        patterns = tuple(r for r in self.rules if isinstance(r, Pattern))
        object.__setattr__(self, "rules", exact + patterns)

    def words_for(self, category: Category) -> frozenset[str]:
        """Union of the exact-set words recognised as *category*."""
        words: frozenset[str] = frozenset()
        for rule in self.rules:
            if isinstance(rule, ExactSet) and rule.category is category:
                words |= rule.words
        return words

    def pattern_for(self, category: Category) -> re.Pattern[str] | None:
        """First pattern recognising *category*, if any."""
        for rule in self.rules:
            if isinstance(rule, Pattern) and rule.category is category:
                return rule.regex
        return None


KEYWORDS = frozenset({"dup", "drop", "over", "swap", "rot", "println"})
BOOLEANS = frozenset({"true", "false"})
NUMERIC_PATTERN = r"[0-9]+"


def build_table(
    keywords: Iterable[str] = KEYWORDS,
    booleans: Iterable[str] = BOOLEANS,
    numeric_pattern: str | re.Pattern[str] = NUMERIC_PATTERN,
) -> CategoryTable:
    """Build a table for the keyword / boolean / numeric category layout.

    Raises re.error if *numeric_pattern* is not a valid regular expression.
    """
    if isinstance(numeric_pattern, str):
        numeric_pattern = re.compile(numeric_pattern)
    return CategoryTable(
        (
            ExactSet(Category.KEYWORD, frozenset(keywords)),
            ExactSet(Category.BOOLEAN_LITERAL, frozenset(booleans)),
            Pattern(Category.NUMERIC_LITERAL, numeric_pattern),
        )
    )


DEFAULT_TABLE = build_table()
