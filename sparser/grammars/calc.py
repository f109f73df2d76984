# sparser/grammars/calc.py
"""Four-function calculator with parentheses.

    expr   := term (('+' | '-') term)*
    term   := factor (('*' | '/') factor)*
    factor := '(' expr ')' | NUMBER

Left-recursion is expressed as repetition and folded left in `map`.
"""

from __future__ import annotations
import operator
from typing import Any, List, Union

from ..rules import Rule
from .common import lexeme, spaces, symbol

Number = Union[int, float]

_OPS = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": operator.truediv,
}


def _to_number(tokens: List[str]) -> List[Number]:
    text = tokens[0]
    return [float(text) if "." in text else int(text)]


def _fold(tokens: List[Any]) -> List[Number]:
    # tokens alternate value, operator, value, ...
    acc = tokens[0]
    for i in range(1, len(tokens), 2):
        acc = _OPS[tokens[i]](acc, tokens[i + 1])
    return [acc]


def calculator() -> Rule:
    # '(' starts the chain so its injection point can refer back to expr
    group = symbol(r"\(").mark_ipoint().and_(symbol(r"\)"))
    number = lexeme(r"\d+(?:\.\d+)?").map(_to_number)
    factor = group.or_(number)
    term = factor.and_(lexeme(r"[*/]").and_(factor).rep_star()).map(_fold)
    expr = term.and_(lexeme(r"[+-]").and_(term).rep_star()).map(_fold).inject()
    return expr.and_(spaces())


_calculator = None


def calculate(text: str) -> Number:
    """Evaluate an arithmetic expression; raises ParseFailure on bad input."""
    global _calculator
    if _calculator is None:
        _calculator = calculator()
    return _calculator.parse(text)[0]
