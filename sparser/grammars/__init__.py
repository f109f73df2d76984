# sparser/grammars/__init__.py
"""Small DSL grammars built on sparser, used by the CLI demos."""

from .nested import nested_digits
from .calc import calculator, calculate
from .kv import kv_block, parse_kv

GRAMMARS = {
    "nested": nested_digits,
    "calc": calculator,
    "kv": kv_block,
}
