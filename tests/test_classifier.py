"""Test token classification against the default and alternate tables."""

from __future__ import annotations

import re

import pytest

from px2syntax.classifier import classify, classify_tokens
from px2syntax.rules import (
    BOOLEANS,
    KEYWORDS,
    Category,
    CategoryTable,
    ExactSet,
    Pattern,
    build_table,
)
from tests.conftest import assert_categories


class TestKeywords:
    @pytest.mark.parametrize("word", sorted(KEYWORDS))
    def test_every_keyword(self, word: str) -> None:
        assert classify(word) == Category.KEYWORD

    def test_keyword_with_no_other_rules(self) -> None:
        table = CategoryTable((ExactSet(Category.KEYWORD, KEYWORDS),))
        assert classify("dup", table) == Category.KEYWORD

    def test_keyword_prefix_is_unclassified(self) -> None:
        assert classify("dupe") == Category.UNCLASSIFIED

    def test_uppercase_keyword_is_unclassified(self) -> None:
        assert classify("DUP") == Category.UNCLASSIFIED


class TestBooleans:
    @pytest.mark.parametrize("word", sorted(BOOLEANS))
    def test_every_boolean(self, word: str) -> None:
        assert classify(word) == Category.BOOLEAN_LITERAL

    def test_case_sensitive(self) -> None:
        assert classify("True") == Category.UNCLASSIFIED
        assert classify("FALSE") == Category.UNCLASSIFIED


class TestNumbers:
    @pytest.mark.parametrize("text", ["0", "7", "42", "007", "123456789012345678901234567890"])
    def test_digit_runs(self, text: str) -> None:
        assert classify(text) == Category.NUMERIC_LITERAL

    @pytest.mark.parametrize("text", ["3x", "x3", "4 2", "-1", "1.5", "+7"])
    def test_not_whole_token_digits(self, text: str) -> None:
        assert classify(text) == Category.UNCLASSIFIED

    def test_non_ascii_digits_are_unclassified(self) -> None:
        # Arabic-Indic digits
        assert classify("٤٢") == Category.UNCLASSIFIED

    def test_trailing_newline_does_not_match(self) -> None:
        assert classify("42\n") == Category.UNCLASSIFIED


class TestUnclassified:
    @pytest.mark.parametrize("text", ["", "x", "foo_bar", "+", "*", "é", " ", "println!"])
    def test_unrecognised(self, text: str) -> None:
        assert classify(text) == Category.UNCLASSIFIED


class TestRuleOrder:
    def test_exact_set_beats_pattern(self) -> None:
        table = build_table(keywords={"dup", "42"})
        assert classify("42", table) == Category.KEYWORD
        assert classify("43", table) == Category.NUMERIC_LITERAL

    def test_exact_set_beats_pattern_declared_first(self) -> None:
        table = CategoryTable(
            (
                Pattern(Category.NUMERIC_LITERAL, re.compile(r"\w+")),
                ExactSet(Category.BOOLEAN_LITERAL, frozenset({"true"})),
            )
        )
        assert classify("true", table) == Category.BOOLEAN_LITERAL
        assert classify("other", table) == Category.NUMERIC_LITERAL

    def test_keyword_set_checked_before_boolean_set(self) -> None:
        table = build_table(keywords={"true"}, booleans={"true"})
        assert classify("true", table) == Category.KEYWORD

    def test_same_input_same_output(self) -> None:
        assert [classify("rot") for _ in range(3)] == [Category.KEYWORD] * 3


class TestAlternateTables:
    def test_extra_keyword(self) -> None:
        table = build_table(keywords=KEYWORDS | {"nip"})
        assert classify("nip", table) == Category.KEYWORD
        assert classify("nip") == Category.UNCLASSIFIED

    def test_custom_booleans(self) -> None:
        table = build_table(booleans={"yes", "no"})
        assert classify("yes", table) == Category.BOOLEAN_LITERAL
        assert classify("true", table) == Category.UNCLASSIFIED

    def test_custom_numeric_pattern(self) -> None:
        table = build_table(numeric_pattern=r"-?[0-9]+")
        assert classify("-12", table) == Category.NUMERIC_LITERAL

    def test_empty_table(self) -> None:
        assert classify("dup", CategoryTable()) == Category.UNCLASSIFIED

    def test_empty_token_with_pattern_matching_empty(self) -> None:
        table = build_table(numeric_pattern=r"[0-9]*")
        assert classify("", table) == Category.UNCLASSIFIED
        assert classify("12", table) == Category.NUMERIC_LITERAL

    def test_empty_token_listed_as_keyword(self) -> None:
        table = build_table(keywords={"", "dup"})
        assert classify("", table) == Category.UNCLASSIFIED
        assert classify("dup", table) == Category.KEYWORD


class TestClassifyTokens:
    def test_program(self, lex) -> None:
        pairs = list(classify_tokens(lex("1 2 swap true x println")))
        assert_categories(
            pairs,
            [
                Category.NUMERIC_LITERAL,
                Category.NUMERIC_LITERAL,
                Category.KEYWORD,
                Category.BOOLEAN_LITERAL,
                Category.UNCLASSIFIED,
                Category.KEYWORD,
            ],
        )

    def test_empty_stream(self) -> None:
        assert list(classify_tokens([])) == []
