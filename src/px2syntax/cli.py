"""Command-line interface for px2syntax."""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import dataclass
from pathlib import Path

from px2syntax.errors import ConfigError
from px2syntax.rules import CategoryTable
from px2syntax.session import Highlight
from px2syntax.styles import StyleBinding


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    input_file: Path
    output_file: Path | None
    table: CategoryTable
    binding: StyleBinding
    output_format: str
    show_all: bool
    debug: bool


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="px2syntax",
        description="Classify px2 source tokens for syntax highlighting",
    )
    p.add_argument("input", help="Input .px2 file")
    p.add_argument("-o", "--output", help="Output file (default: stdout)")
    p.add_argument(
        "--format",
        choices=("text", "json"),
        default="text",
        help="Output format (default: text)",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help="Config file (default: auto-discover px2syntax.toml)",
    )
    p.add_argument(
        "--keyword",
        action="append",
        default=[],
        metavar="WORD",
        help="Extra keyword (repeatable)",
    )
    p.add_argument(
        "--boolean",
        action="append",
        default=[],
        metavar="WORD",
        help="Extra boolean literal (repeatable)",
    )
    p.add_argument(
        "--numeric-pattern",
        metavar="REGEX",
        help="Whole-token pattern for numeric literals (default: [0-9]+)",
    )
    p.add_argument("--all", action="store_true", help="Include unclassified tokens")
    p.add_argument("--debug", action="store_true", help="Dump the rule table to stderr")
    return p


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: built-in defaults < config file < CLI flags.
    """
    from px2syntax.config import (
        CONFIG_FILENAME,
        binding_from_config,
        compile_pattern,
        load_config,
        table_from_config,
    )
    from px2syntax.rules import NUMERIC_PATTERN, Category, build_table

    input_file = Path(args.input)
    input_dir = input_file.parent
    if not input_dir.parts:
        input_dir = Path(".")

    config_path = Path(args.config) if args.config else None
    config = load_config(config_path, input_dir)
    source_path = config_path if config_path is not None else input_dir / CONFIG_FILENAME

    table = table_from_config(config, source_path)
    binding = binding_from_config(config, source_path)

    if args.keyword or args.boolean or args.numeric_pattern is not None:
        keywords = table.words_for(Category.KEYWORD) | set(args.keyword)
        booleans = table.words_for(Category.BOOLEAN_LITERAL) | set(args.boolean)
        if args.numeric_pattern is not None:
            pattern = compile_pattern(args.numeric_pattern)
        else:
            pattern = table.pattern_for(Category.NUMERIC_LITERAL)
            if pattern is None:
                pattern = compile_pattern(NUMERIC_PATTERN)
        table = build_table(keywords, booleans, pattern)

    output_file = Path(args.output) if args.output else None

    return CliOptions(
        input_file=input_file,
        output_file=output_file,
        table=table,
        binding=binding,
        output_format=args.format,
        show_all=args.all,
        debug=args.debug,
    )


def format_text(highlights: list[Highlight]) -> str:
    """One line per token: ``line:col<TAB>text<TAB>Category<TAB>role``."""
    lines = []
    for h in highlights:
        start = h.token.span.start
        role = h.role if h.role is not None else "-"
        lines.append(f"{start.line}:{start.column}\t{h.token.text}\t{h.category.value}\t{role}")
    return "".join(line + "\n" for line in lines)


def format_json(highlights: list[Highlight]) -> str:
    records = [
        {
            "text": h.token.text,
            "line": h.token.span.start.line,
            "column": h.token.span.start.column,
            "offset": h.token.span.start.offset,
            "length": h.token.length,
            "category": h.category.value,
            "role": h.role,
        }
        for h in highlights
    ]
    return json.dumps(records, indent=2) + "\n"


def highlight_file(options: CliOptions) -> str:
    """Read, scan, classify and format a px2 file."""
    from px2syntax.debug import dump_table
    from px2syntax.lexer import tokenize
    from px2syntax.session import Highlighter

    source = options.input_file.read_text(encoding="utf-8")

    if options.debug:
        dump_table(options.table, options.binding)

    highlights = Highlighter(options.table, options.binding).highlight(tokenize(source))
    if not options.show_all:
        highlights = [h for h in highlights if h.role is not None]

    if options.output_format == "json":
        return format_json(highlights)
    return format_text(highlights)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        options = resolve_options(args)
    except ConfigError as exc:
        print(str(exc), file=sys.stderr)
        return 2

    try:
        output = highlight_file(options)
    except (OSError, UnicodeDecodeError) as exc:
        print(f"error: cannot read {options.input_file}: {exc}", file=sys.stderr)
        return 1

    if options.output_file:
        options.output_file.write_text(output, encoding="utf-8")
    else:
        sys.stdout.write(output)

    return 0
