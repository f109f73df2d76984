# sparser/grammars/nested.py
"""Balanced nesting of single digits, e.g. ``(1(2(3)))``."""

from __future__ import annotations

from ..rules import Rule, empty
from .common import symbol, lexeme


def nested_digits() -> Rule:
    """Rule producing the digits in nesting order: ``(1(2))`` -> ``['1', '2']``.

    Grammar::

        nest := '(' DIGIT nest ')' | <empty>
    """
    head = symbol(r"\(").and_(lexeme(r"\d"))
    return head.mark_ipoint().and_(symbol(r"\)")).or_(empty()).inject()
