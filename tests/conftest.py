import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def reset_logger():
    # the CLI swaps loguru's sinks for one on the runner's stderr
    yield
    logger.remove()
