"""Logging helpers for the package."""

from __future__ import annotations

import logging
import sys
from pathlib import Path


_DEFAULT_LOG = Path.home() / ".prefix_suggest.log"

PACKAGE_LOGGER = "prefix_suggest"

_FORMAT = "%(asctime)s  %(levelname)-8s  %(name)s: %(message)s"


def setup(level: int = logging.INFO, log_file: str | Path | None = None) -> logging.Logger:
    """Configure the ``prefix_suggest`` logger and return it.

    Parameters
    ----------
    level:
        Minimum severity level for log messages.
    log_file:
        Optional path to the log file.  If not provided,
        ``~/.prefix_suggest.log`` is used.

    Calling ``setup`` again replaces the handlers installed earlier, and
    loggers outside the package are left alone.
    """

    log_file = _DEFAULT_LOG if log_file is None else Path(log_file)
    logger = logging.getLogger(PACKAGE_LOGGER)

    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    try:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    except OSError:
        # console-only when the log file can't be opened
        pass

    formatter = logging.Formatter(_FORMAT, datefmt="%H:%M:%S")
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False

    def _excepthook(exc_type, exc, tb) -> None:
        logger.critical("Unhandled exception", exc_info=(exc_type, exc, tb))

    sys.excepthook = _excepthook
    return logger
