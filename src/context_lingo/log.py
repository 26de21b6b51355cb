"""Logging setup for ContextLingo.

Set CONTEXT_LINGO_LOG_LEVEL to control verbosity (DEBUG/INFO/WARNING/ERROR).
"""

import logging
import os
import sys

ROOT_LOGGER_NAME = "context_lingo"


def get_logger(name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    """Get a logger under the package root, configuring the root once.

    Usage:
        from context_lingo.log import get_logger
        logger = get_logger(__name__)
        logger.info("Vocabulary loaded: %d items", count)
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if not root.handlers:
        level = os.environ.get("CONTEXT_LINGO_LOG_LEVEL", "INFO").upper()
        root.setLevel(getattr(logging, level, logging.INFO))

        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%H:%M:%S",
        ))
        root.addHandler(handler)
    return logging.getLogger(name)
