"""Logging setup for the word search generators.

All loggers live under the ``wordsearch`` namespace. Only that namespace is
configured, so embedding applications keep control of the root logger. The
intersecting search can visit tens of thousands of branches: per-branch
detail goes to DEBUG, milestones (best grid found, budget exhausted) to INFO
and partial or failed generations to WARNING.
"""

from __future__ import annotations

import logging
from typing import Optional, TextIO

ROOT_LOGGER = "wordsearch"
DEFAULT_LEVEL = logging.WARNING
LOG_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"


def configure_logging(level: int = DEFAULT_LEVEL, stream: Optional[TextIO] = None) -> logging.Logger:
    """Attach a single formatted handler to the ``wordsearch`` logger.

    Calling it again replaces the handler, so the CLI can switch levels
    between runs in the same process.
    """

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt="%H:%M:%S"))

    logger = logging.getLogger(ROOT_LOGGER)
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger inside the ``wordsearch`` namespace.

    Names outside the namespace (``"cli"``, ``"__main__"``) are nested under
    it so that :func:`configure_logging` reaches them.
    """

    if not logging.getLogger(ROOT_LOGGER).handlers:
        configure_logging()
    if not name or name == ROOT_LOGGER:
        return logging.getLogger(ROOT_LOGGER)
    if not name.startswith(ROOT_LOGGER + "."):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)
