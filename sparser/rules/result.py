# sparser/rules/result.py
from __future__ import annotations
from typing import Any, List, NamedTuple, Optional, Union

from ..errors import ParseFailure


class Success(NamedTuple):
    """Matched tokens paired with the next unconsumed offset."""
    tokens: List[Any]
    pos: int

    @property
    def ok(self) -> bool:
        return True


class Failure(NamedTuple):
    pos: int
    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return False

    def to_exception(self, source: str) -> ParseFailure:
        return ParseFailure(self.message, self.pos, source)


Result = Union[Success, Failure]
