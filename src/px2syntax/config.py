"""TOML config loading and conversion into rule tables and style bindings.

Recognised layout::

    [rules]
    keywords = ["dup", "drop"]
    booleans = ["true", "false"]
    numeric_pattern = "[0-9]+"

    [styles]
    keyword = "Keyword"
    boolean = "Boolean"
    number = "Number"

Absent keys keep the built-in defaults.
"""

from __future__ import annotations

import re
import tomllib
from pathlib import Path
from typing import Any

from px2syntax.errors import ConfigError
from px2syntax.rules import (
    BOOLEANS,
    KEYWORDS,
    NUMERIC_PATTERN,
    Category,
    CategoryTable,
    build_table,
)
from px2syntax.styles import DEFAULT_BINDING, StyleBinding

CONFIG_FILENAME = "px2syntax.toml"

# [styles] key -> category it rebinds
_STYLE_KEYS = {
    "keyword": Category.KEYWORD,
    "boolean": Category.BOOLEAN_LITERAL,
    "number": Category.NUMERIC_LITERAL,
}


def load_config(config_path: Path | None, search_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else search_dir / CONFIG_FILENAME

    if not path.is_file():
        return {}

    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"invalid TOML: {exc}", path) from exc


def _section(config: dict[str, Any], name: str, path: Path | None) -> dict[str, Any]:
    section = config.get(name, {})
    if not isinstance(section, dict):
        raise ConfigError(f"'{name}' must be a table", path, name)
    return section


def _word_list(
    section: dict[str, Any], key: str, default: frozenset[str], path: Path | None
) -> list[str]:
    value = section.get(key)
    if value is None:
        return sorted(default)
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigError(f"'{key}' must be a list of strings", path, f"rules.{key}")
    return value


def compile_pattern(pattern: str, path: Path | None = None) -> re.Pattern[str]:
    """Compile a numeric pattern, reporting bad regexes as ConfigError."""
    try:
        return re.compile(pattern)
    except re.error as exc:
        raise ConfigError(
            f"invalid numeric pattern {pattern!r}: {exc}", path, "rules.numeric_pattern"
        ) from exc


def table_from_config(config: dict[str, Any], path: Path | None = None) -> CategoryTable:
    """Build a CategoryTable from the ``[rules]`` section of *config*."""
    rules = _section(config, "rules", path)
    keywords = _word_list(rules, "keywords", KEYWORDS, path)
    booleans = _word_list(rules, "booleans", BOOLEANS, path)

    pattern = rules.get("numeric_pattern", NUMERIC_PATTERN)
    if not isinstance(pattern, str):
        raise ConfigError("'numeric_pattern' must be a string", path, "rules.numeric_pattern")

    return build_table(keywords, booleans, compile_pattern(pattern, path))


def binding_from_config(config: dict[str, Any], path: Path | None = None) -> StyleBinding:
    """Build a StyleBinding from the ``[styles]`` section of *config*."""
    styles = _section(config, "styles", path)
    roles = dict(DEFAULT_BINDING.roles)
    for key, value in styles.items():
        category = _STYLE_KEYS.get(key)
        if category is None:
            raise ConfigError(f"unknown style '{key}'", path, f"styles.{key}")
        if not isinstance(value, str) or not value:
            raise ConfigError(f"style '{key}' must be a non-empty string", path, f"styles.{key}")
        roles[category] = value
    return StyleBinding(roles)
