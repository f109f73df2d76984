# sparser/grammars/common.py
"""Lexeme helpers shared by the bundled grammars.

A leaf never matches at end of input, so optional whitespace is written as
`rep(0, 1)` of a non-empty whitespace leaf rather than as a `\\s*` leaf.
"""

from __future__ import annotations

from ..rules import Rule, leaf


def spaces() -> Rule:
    """Optional run of whitespace, discarded."""
    return leaf(r"\s+").map_discard().optional()


def lexeme(pattern: str) -> Rule:
    """`pattern` preceded by optional whitespace; keeps the matched text."""
    return spaces().and_(leaf(pattern))


def symbol(pattern: str) -> Rule:
    """Punctuation: required for structure, dropped from the result."""
    return lexeme(pattern).map_discard()
