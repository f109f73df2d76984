import regex
import pytest

from sparser import GrammarError, ParseFailure, Success, Failure, leaf
from sparser.rules.engine import OUT_OF_BOUNDS


def test_whole_input_match_returns_single_token():
    assert leaf(r"\d+").parse("12345") == ["12345"]


def test_prefix_match_leaves_trailing_input():
    assert leaf(r"\d+").run("123abc") == Success(["123"], 3)


def test_match_is_anchored_at_offset():
    assert leaf("b").run("ab") == Failure(0)
    assert leaf("b").run("ab", 1) == Success(["b"], 2)


def test_no_token_found_fails_at_start_offset():
    res = leaf(r"\d").run("12x", 2)
    assert not res.ok
    assert res.pos == 2
    assert res.message is None


def test_offset_at_end_is_out_of_bounds():
    res = leaf("a*").run("aa", 2)
    assert res == Failure(2, OUT_OF_BOUNDS)


def test_empty_input_is_out_of_bounds():
    with pytest.raises(ParseFailure) as exc:
        leaf("a*").parse("")
    assert exc.value.pos == 0
    assert exc.value.message == OUT_OF_BOUNDS


def test_flags_are_passed_to_regex():
    assert leaf("abc", regex.IGNORECASE).parse("ABC") == ["ABC"]


def test_invalid_pattern_is_grammar_error():
    with pytest.raises(GrammarError):
        leaf("(")


def test_non_string_pattern_is_grammar_error():
    with pytest.raises(GrammarError):
        leaf(42)


def test_negative_start_offset_rejected():
    with pytest.raises(GrammarError):
        leaf("a").run("a", -1)


def test_start_anchor_is_relative_to_offset():
    assert leaf("a").and_(leaf("^b")).parse("ab") == ["a", "b"]
    assert leaf("a").and_(leaf(r"\Ab")).parse("ab") == ["a", "b"]


def test_lookbehind_does_not_see_consumed_input():
    rule = leaf("a").and_(leaf("(?<=a)b"))
    with pytest.raises(ParseFailure):
        rule.parse("ab")


def test_word_boundary_at_offset():
    # the leaf's input starts at its offset, so \b holds before a word char
    assert leaf("a").and_(leaf(r"\bb")).parse("ab") == ["a", "b"]
