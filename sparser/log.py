"""
Logging for sparser, built on Loguru.

The package disables its own logger namespace on import, so a host
application sees nothing unless it opts in. `configure()` installs a
formatted stderr sink and enables the namespace; the sparserc CLI calls it
for -D/--debug.

Usage:
    from sparser.log import configure

    configure(level="TRACE", trace=True)
    rule.parse("...")   # every rule application is logged
"""

import sys
from typing import Any, Optional, TextIO

from loguru import logger

from .settings import settings

logger_format = (
    "<green>{time:HH:mm:ss}</green> │ "
    "<level>{level: <5}</level> │ "
    "<cyan>{function: <12}</cyan> ║ "
    "<level>{message}</level>"
)

# handler installed by configure(); host handlers are never touched
_handler_id: Optional[int] = None


def configure(level: Optional[str] = None, trace: Optional[bool] = None,
              sink: Optional[TextIO] = None) -> Any:
    """
    Route sparser logs to `sink` and enable them.

    Args:
        level: minimum level; defaults to settings.log_level
        trace: overrides settings.trace when given
        sink: destination stream (stderr by default)

    Returns:
        The loguru handler id, for logger.remove() by the caller.
    """
    global _handler_id
    if trace is not None:
        settings.trace = trace
    if _handler_id is not None:
        try:
            logger.remove(_handler_id)
        except ValueError:
            pass  # already removed by the host
    _handler_id = logger.add(sink or sys.stderr, format=logger_format,
                            level=(level or settings.log_level).upper())
    logger.enable("sparser")
    return _handler_id
