from __future__ import annotations

import logging

import pytest

from blockslide.config import ENV_LOG_LEVEL, ENV_MAX_STATES, ENV_PROGRESS_EVERY


@pytest.fixture(autouse=True)
def _isolate(monkeypatch: pytest.MonkeyPatch):
    """Keep each test free of user environment and earlier logging setup."""
    for name in (ENV_MAX_STATES, ENV_PROGRESS_EVERY, ENV_LOG_LEVEL):
        monkeypatch.delenv(name, raising=False)
    yield
    logger = logging.getLogger("blockslide")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
