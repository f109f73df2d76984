# sparser/__init__.py
r"""sparser: recursive-descent parsers from regex leaves and combinators.

    >>> from sparser import leaf, empty
    >>> digits = leaf(r"\d+").map(lambda t: [int(t[0])])
    >>> digits.and_(leaf(r",").map_discard().and_(digits).rep_star()).parse("1,2,3")
    [1, 2, 3]
"""

from loguru import logger

from .errors import ParseFailure, GrammarError, require
from .rules import Rule, UNBOUNDED, leaf, empty, Success, Failure

__version__ = "0.3.0"

# library default: silent unless the host calls sparser.log.configure()
logger.disable("sparser")

__all__ = [
    "Rule", "UNBOUNDED", "leaf", "empty",
    "Success", "Failure",
    "ParseFailure", "GrammarError", "require",
    "__version__",
]
