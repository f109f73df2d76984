# sparser/rules/engine.py
from __future__ import annotations
from typing import Callable, Dict, Generator, List, Tuple, Type

from loguru import logger

from ..errors import GrammarError
from ..settings import settings
from .ast import Choice, Empty, Map, Node, Pattern, Repeat, Seq, Splice, describe
from .result import Failure, Result, Success

# Evaluation engine:
# - Every combinator is a generator frame. It yields (child, pos) to ask for
#   a child's result and receives that tagged result back through send().
# - `evaluate` keeps the frames on an explicit stack, so Python recursion
#   depth stays flat however deep the grammar nests or however long a
#   repetition runs.
# - Leaves and Empty are resolved inline, without a frame.
# - Only Failure results drive backtracking. Exceptions from user map
#   functions are never caught here.

Frame = Generator[Tuple[Node, int], Result, Result]

OUT_OF_BOUNDS = "attempted to parse past the end of input"


def match_leaf(node: Pattern, text: str, pos: int) -> Result:
    """Prefix-match `node` at `pos`; trailing input is left for the caller.

    The pattern sees the input from `pos` on only, so `^`, `\\A` and
    lookbehind treat `pos` as the start of input.
    """
    if pos >= len(text):
        return Failure(pos, OUT_OF_BOUNDS)
    m = node.compiled.match(text[pos:])
    if m is None:
        return Failure(pos)
    value = m.group(0)
    return Success([value], pos + len(value))


# ---- Combinator frames ----

def _seq(node: Seq, pos: int) -> Frame:
    first = yield node.left, pos
    if not first.ok:
        return first
    second = yield node.right, first.pos
    if not second.ok:
        return second
    return Success(first.tokens + second.tokens, second.pos)


def _choice(node: Choice, pos: int) -> Frame:
    first = yield node.left, pos
    if first.ok:
        return first
    return (yield node.right, pos)


def _repeat(node: Repeat, pos: int) -> Frame:
    tokens: List = []
    cur = pos
    count = 0
    while node.max is None or count < node.max:
        res = yield node.node, cur
        if not res.ok:
            break
        tokens.extend(res.tokens)
        count += 1
        if res.pos == cur:
            # zero-width match: every further attempt ends the same way
            if node.max is None:
                count = max(count, node.min)
            else:
                tokens.extend(res.tokens * (node.max - count))
                count = node.max
            break
        cur = res.pos
    if count < node.min:
        return Failure(cur, f"expected at least {node.min} repetition(s), matched {count}")
    return Success(tokens, cur)


def _map(node: Map, pos: int) -> Frame:
    res = yield node.node, pos
    if not res.ok:
        return res
    return Success(list(node.func(res.tokens)), res.pos)


def _splice(node: Splice, pos: int) -> Frame:
    first = yield node.node, pos
    if not first.ok:
        return first
    if node.slot.rule is None:
        raise GrammarError("injection point reached before inject() was called")
    second = yield node.slot.rule, first.pos
    if not second.ok:
        return second
    return Success(first.tokens + second.tokens, second.pos)


_FRAMES: Dict[Type, Callable[..., Frame]] = {
    Seq: _seq,
    Choice: _choice,
    Repeat: _repeat,
    Map: _map,
    Splice: _splice,
}


def evaluate(root: Node, text: str, pos: int = 0) -> Result:
    """Run `root` on `text` from `pos` and return the tagged result."""
    trace = settings.trace
    stack: List[Frame] = []
    node, at = root, pos
    while True:
        # descend: leaves resolve now, combinators get a frame
        if trace:
            logger.trace("{} @{}", describe(node), at)
        if isinstance(node, Pattern):
            result = match_leaf(node, text, at)
        elif isinstance(node, Empty):
            result = Success([], at)
        else:
            step = _FRAMES.get(type(node))
            if step is None:
                raise AssertionError(f"unknown node: {node!r}")
            stack.append(step(node, at))
            result = None

        # ascend: hand results to frames until one asks for another child
        while stack:
            if trace and result is not None:
                logger.trace("  -> {}", result)
            try:
                node, at = stack[-1].send(result)
                break
            except StopIteration as stop:
                stack.pop()
                result = stop.value
        else:
            return result
