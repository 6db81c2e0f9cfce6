import logging

import pytest

from ethunits import config
from ethunits.checksum_cache import get_checksum_address
from ethunits.logging import logger


@pytest.fixture(autouse=True)
def _initialize_and_reset_after_each_test(monkeypatch: pytest.MonkeyPatch):
    """
    Before each test, restore the default settings and clear the checksum cache
    """
    monkeypatch.setattr(config, "settings", config.Settings())
    get_checksum_address.cache_clear()


@pytest.fixture(scope="session", autouse=True)
def _set_ethunits_logging():
    """
    Set the logging level to DEBUG for the test run
    """
    logger.setLevel(logging.DEBUG)
