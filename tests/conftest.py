import logging

import pytest

from polyrep.config import LOGGER_NAME


@pytest.fixture(autouse=True)
def _reset_polyrep_logger():
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()
