import sys

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def reset_logging():
    """The CLI replaces loguru sinks; restore a stderr sink bound at write time"""
    yield
    logger.remove()
    logger.add(lambda message: sys.stderr.write(message), level="DEBUG")
