import pytest
from loguru import logger

from sparser.settings import settings


@pytest.fixture(autouse=True)
def _reset_logging():
    yield
    settings.trace = False
    logger.remove()
    logger.disable("sparser")


@pytest.fixture
def log_messages():
    """Collect sparser log lines emitted during the test."""
    messages = []
    logger.enable("sparser")
    handler = logger.add(messages.append, level="TRACE", format="{message}")
    yield messages
    logger.remove(handler)
