"""
Logging setup for the wangtiler.* loggers.

The library itself only calls logging.getLogger(__name__); front ends call
setup_logging() once at startup.
"""

import logging
import sys

ROOT_LOGGER = "wangtiler"


def setup_logging(level: int = logging.WARNING, stream=None) -> logging.Logger:
    root_logger = logging.getLogger(ROOT_LOGGER)
    root_logger.setLevel(level)

    # Clear any existing handlers (for re-initialization)
    root_logger.handlers.clear()

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt="%(levelname)-8s | %(name)-25s | %(message)s"))
    root_logger.addHandler(handler)
    root_logger.propagate = False
    return root_logger
