"""Category to role-name binding.

A role-name says what a token *is* for presentation purposes ("Keyword",
"Boolean", "Number"); resolving it to colours or fonts is up to the host.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from px2syntax.rules import Category

_CLASSIFIED = tuple(c for c in Category if c is not Category.UNCLASSIFIED)


@dataclass(frozen=True, slots=True)
class StyleBinding:
    """Immutable mapping from every classified category to a role-name."""

    roles: Mapping[Category, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if Category.UNCLASSIFIED in self.roles:
            raise ValueError("Unclassified tokens cannot be bound to a role")
        missing = [c.value for c in _CLASSIFIED if c not in self.roles]
        if missing:
            raise ValueError(f"no role bound for: {', '.join(missing)}")
        object.__setattr__(self, "roles", MappingProxyType(dict(self.roles)))


DEFAULT_BINDING = StyleBinding(
    {
        Category.KEYWORD: "Keyword",
        Category.BOOLEAN_LITERAL: "Boolean",
        Category.NUMERIC_LITERAL: "Number",
    }
)


def style_for(category: Category, binding: StyleBinding = DEFAULT_BINDING) -> str | None:
    """Return the role-name for *category*, or None when it is unclassified."""
    return binding.roles.get(category)
