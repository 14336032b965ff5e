import logging

import pytest

from orderentry.infrastructure.logging_config import LOGGER_NAME


@pytest.fixture(autouse=True)
def reset_orderentry_logger():
    """Drop handlers installed by the CLI so each invocation starts clean."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
