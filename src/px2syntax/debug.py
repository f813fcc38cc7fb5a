"""--debug dump of the active rule table and style binding to stderr."""

from __future__ import annotations

import sys
from typing import TextIO

from px2syntax.rules import CategoryTable, ExactSet, Pattern
from px2syntax.styles import StyleBinding, style_for


def dump_table(table: CategoryTable, binding: StyleBinding, *, file: TextIO = sys.stderr) -> None:
    """Print each rule in evaluation order with its role-name to *file*."""
    file.write("CategoryTable\n")
    for index, rule in enumerate(table.rules, 1):
        role = style_for(rule.category, binding)
        if isinstance(rule, ExactSet):
            words = " ".join(sorted(rule.words))
            file.write(f"  {index}. {rule.category.value} -> {role} exact {{{words}}}\n")
        elif isinstance(rule, Pattern):
            pattern = rule.regex.pattern
            file.write(f"  {index}. {rule.category.value} -> {role} pattern /{pattern}/\n")
