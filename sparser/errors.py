# sparser/errors.py
"""sparser diagnostics.

- `ParseFailure` is the single parse-failure kind. No-token-found,
  insufficient repetitions, unconsumed input and out-of-bounds failures
  differ only by message.
- `GrammarError` reports a grammar that was built wrong (bad bounds,
  invalid pattern, injection point misuse). It is never a parse outcome.
"""

from __future__ import annotations
from typing import Optional


class GrammarError(ValueError):
    """Grammar construction contract violation."""


def require(condition: bool, message: str) -> None:
    """Raise `GrammarError` with `message` unless `condition` holds."""
    if not condition:
        raise GrammarError(message)


def _escape_newlines(text: str) -> str:
    return text.replace("\n", "\\n")


def caret_snippet(source: str, pos: int) -> str:
    """Whole input on one line (newlines escaped) with a caret under `pos`."""
    line = _escape_newlines(source)
    # escaped newlines widen the line, so measure the escaped prefix
    col = len(_escape_newlines(source[:pos]))
    return f"{line}\n{' ' * col}^"


class ParseFailure(SyntaxError):
    """Parse failure carrying the failing offset and the original input."""

    def __init__(self, message: Optional[str] = None,
                 pos: Optional[int] = None,
                 source: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.pos = pos
        self.source = source

    def _location(self) -> str:
        if self.pos >= len(self.source):
            return f"end of input at position {self.pos + 1}"
        return f"token {self.source[self.pos]!r} at position {self.pos + 1}"

    def headline(self) -> str:
        has_message = bool(self.message and self.message.strip())
        if self.pos is None or self.source is None:
            return self.message if has_message else "Parse failure"
        if has_message:
            # a custom message still names the failing character
            return f"{self.message} (unexpected {self._location()})"
        return f"Unexpected {self._location()}"

    def __str__(self) -> str:
        if self.pos is None or self.source is None:
            return self.headline()
        return f"{self.headline()}\n\n{caret_snippet(self.source, self.pos)}\n"
