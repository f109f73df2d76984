# sparser/grammars/kv.py
"""Semicolon-separated ``key = value`` pairs with nested ``{ ... }`` blocks.

    body  := (pair (';' pair)* ';'?)?
    pair  := KEY '=' value
    value := '{' body '}' | QUOTED | BARE

``a = 1; b = { c = "x y" }`` -> ``{'a': '1', 'b': {'c': 'x y'}}``.
"""

from __future__ import annotations
from typing import Any, Dict, List

import regex as re

from ..rules import Rule, empty
from .common import lexeme, spaces, symbol

_ESCAPE_RE = re.compile(r"\\(.)", re.S)


def _unquote(tokens: List[str]) -> List[str]:
    return [_ESCAPE_RE.sub(r"\1", tokens[0][1:-1])]


def _pair(tokens: List[Any]) -> List[tuple]:
    return [(tokens[0], tokens[1])]


def _to_dict(tokens: List[tuple]) -> List[Dict[str, Any]]:
    return [dict(tokens)]


def kv_block() -> Rule:
    # `body` starts with a pair, not with '{', so an empty() anchor owns the
    # chain that both the block injection point and body derive from
    anchor = empty()
    block = anchor.and_(symbol(r"\{")).mark_ipoint().and_(symbol(r"\}"))
    quoted = lexeme(r'"(?:[^"\\]|\\.)*"').map(_unquote)
    bare = lexeme(r'[^\s;{}="]+')
    value = block.or_(quoted).or_(bare)

    pair = lexeme(r"[A-Za-z_][\w.-]*").and_(symbol("=")).and_(value).map(_pair)
    pairs = pair.and_(symbol(";").and_(pair).rep_star()).and_(symbol(";").optional())
    body = anchor.and_(pairs.optional()).map(_to_dict).inject()
    return body.and_(spaces())


def parse_kv(text: str) -> Dict[str, Any]:
    return kv_block().parse(text)[0]
