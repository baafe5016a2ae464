import logging
import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from prefix_suggest.dictionary import build


@pytest.fixture
def animals():
    return build([("cat", 10), ("car", 20), ("cart", 5), ("dog", 1)])


@pytest.fixture(autouse=True)
def _no_home_log(tmp_path, monkeypatch):
    # keep logging.setup() from writing into the real home directory
    import prefix_suggest.logging as suggest_logging
    monkeypatch.setattr(suggest_logging, "_DEFAULT_LOG", tmp_path / "suggest.log")
    monkeypatch.setattr(sys, "excepthook", sys.excepthook)
    yield
    logger = logging.getLogger(suggest_logging.PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
