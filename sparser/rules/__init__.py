# sparser/rules/__init__.py
"""Combinator core for sparser.

This package provides:
- Rule node dataclasses and the shared injection Slot
- The tagged Success/Failure result pair
- An explicit-stack evaluation engine with regex leaves
- The fluent `Rule` builder and the full-consumption driver
"""

from .ast import (
    Pattern, Empty, Seq, Choice, Repeat, Map, Splice, Slot, Node,
)
from .result import Success, Failure, Result
from .engine import evaluate, match_leaf
from .runtime import Rule, UNBOUNDED, leaf, empty
