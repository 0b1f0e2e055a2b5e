import logging

import pytest
import pytest_asyncio

from securepass.history import HistoryStore


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "data" / "history.db"


@pytest.fixture
def logger():
    test_logger = logging.getLogger("SecurePass.tests")
    test_logger.setLevel(logging.DEBUG)
    return test_logger


@pytest_asyncio.fixture
async def store(db_path, logger):
    history = HistoryStore(db_path, logger)
    await history.open()
    yield history
    await history.close()
