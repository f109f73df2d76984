# sparser/rules/runtime.py
"""Rule builder and top-level driver.

A `Rule` wraps an immutable node graph plus the `Slot` of the chain it was
derived from. Every combinator returns a new `Rule` that shares the slot of
its left-hand (receiving) rule, so `mark_ipoint()` and a later `inject()`
anywhere on the same chain talk about the same cell. Leaves and `empty()`
start a fresh chain.
"""

from __future__ import annotations
from typing import Any, Callable, Iterable, List, Optional, Union

import regex as re
from loguru import logger

from ..errors import GrammarError, ParseFailure, require
from .ast import Choice, Empty, Map, Node, Pattern, Repeat, Seq, Slot, Splice, children, describe
from .engine import evaluate
from .result import Result

UNBOUNDED = None  # rep() max with no upper limit

RuleLike = Union["Rule", str]


def _discard(tokens: List[Any]) -> List[Any]:
    return []


def _unresolved_ipoint(root: Node) -> Optional[Splice]:
    """First reachable injection point whose slot is still empty."""
    seen = set()
    todo = [root]
    while todo:
        node = todo.pop()
        if node in seen:
            continue
        seen.add(node)
        if isinstance(node, Splice) and not node.slot.filled:
            return node
        todo.extend(children(node))
    return None


class Rule:
    """A parsing rule built from regex leaves and combinators."""

    __slots__ = ("node", "slot", "_checked")

    def __init__(self, node: Node, slot: Optional[Slot] = None):
        self.node = node
        self.slot = slot if slot is not None else Slot()
        self._checked = False

    # ---- construction ----

    @classmethod
    def from_regex(cls, pattern: str, flags: int = 0) -> "Rule":
        """Leaf rule matching `pattern` as a prefix at the current offset."""
        require(isinstance(pattern, str), f"pattern must be a string, got {type(pattern).__name__}")
        try:
            compiled = re.compile(pattern, flags)
        except re.error as e:
            raise GrammarError(f"invalid pattern {pattern!r}: {e}") from e
        return cls(Pattern(pattern, compiled))

    def _derive(self, node: Node) -> "Rule":
        return Rule(node, self.slot)

    def and_(self, other: RuleLike) -> "Rule":
        """Sequence: this rule, then `other` from where this one stopped."""
        return self._derive(Seq(self.node, _coerce(other).node))

    def or_(self, other: RuleLike) -> "Rule":
        """Ordered choice: this rule, or `other` from the same offset if it fails."""
        return self._derive(Choice(self.node, _coerce(other).node))

    def __and__(self, other: RuleLike) -> "Rule":
        return self.and_(other)

    def __rand__(self, other: str) -> "Rule":
        return _coerce(other).and_(self)

    def __or__(self, other: RuleLike) -> "Rule":
        return self.or_(other)

    def __ror__(self, other: str) -> "Rule":
        return _coerce(other).or_(self)

    def rep(self, min: int, max: Optional[int] = UNBOUNDED) -> "Rule":
        """Match this rule between `min` and `max` times, like `{min,max}` in a regex."""
        require(isinstance(min, int) and min >= 0, f"rep() min must be >= 0, got {min!r}")
        require(max is UNBOUNDED or (isinstance(max, int) and max >= min),
                f"rep() max must be >= min ({min}), got {max!r}")
        return self._derive(Repeat(self.node, min, max))

    def rep_star(self) -> "Rule":
        return self.rep(0)

    def rep_plus(self) -> "Rule":
        return self.rep(1)

    def optional(self) -> "Rule":
        return self.rep(0, 1)

    def map(self, func: Callable[[List[Any]], Iterable[Any]]) -> "Rule":
        """Replace the matched tokens with `func(tokens)`; the offset is unchanged."""
        require(callable(func), "map() needs a callable")
        return self._derive(Map(self.node, func))

    def map_discard(self) -> "Rule":
        """Keep the match but drop its tokens (whitespace, punctuation)."""
        return self.map(_discard)

    # ---- recursion ----

    def mark_ipoint(self) -> "Rule":
        """Parse this rule, then whatever rule is later given to inject() on this chain."""
        return self._derive(Splice(self.node, self.slot))

    def inject(self) -> "Rule":
        """Resolve this chain's injection point to this rule. Allowed once per chain."""
        self.slot.fill(self.node)
        return self

    # ---- running ----

    def check(self) -> "Rule":
        """Raise GrammarError if an injection point reachable from here is unresolved."""
        if not self._checked:
            pending = _unresolved_ipoint(self.node)
            if pending is not None:
                raise GrammarError(
                    f"injection point after {describe(pending.node)} used before inject()")
            # slots are write-once, so a passing check stays valid
            self._checked = True
        return self

    def run(self, text: str, pos: int = 0) -> Result:
        """Tagged result of this rule from `pos`; no full-consumption check."""
        require(isinstance(pos, int) and pos >= 0, f"start offset must be >= 0, got {pos!r}")
        self.check()
        return evaluate(self.node, text, pos)

    def parse(self, text: str) -> List[Any]:
        """Parse all of `text` and return the tokens, or raise ParseFailure."""
        logger.debug("parse {} over {} chars", describe(self.node), len(text))
        result = self.run(text)
        if not result.ok:
            logger.debug("failed at {}: {}", result.pos, result.message)
            raise result.to_exception(text)
        if result.pos != len(text):
            logger.debug("stopped at {} of {}", result.pos, len(text))
            raise ParseFailure("Unconsumed input", result.pos, text)
        return result.tokens

    def __repr__(self) -> str:
        return f"Rule({describe(self.node)})"


def _coerce(other: RuleLike) -> Rule:
    if isinstance(other, Rule):
        return other
    if isinstance(other, str):
        return Rule.from_regex(other)
    raise TypeError(f"expected Rule or pattern string, got {type(other).__name__}")


def leaf(pattern: str, flags: int = 0) -> Rule:
    """Shorthand for `Rule.from_regex`."""
    return Rule.from_regex(pattern, flags)


def empty() -> Rule:
    """Rule that always succeeds, consuming nothing and producing no tokens."""
    return Rule(Empty())
