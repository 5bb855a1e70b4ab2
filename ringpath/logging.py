"""Logging for ringpath.

All module loggers are children of the ``ringpath`` logger, which gets one
stdout handler the first time any logger is requested.
"""

import logging
import sys

ROOT_LOGGER_NAME = "ringpath"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _root_logger() -> logging.Logger:
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    if not root_logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root_logger.addHandler(handler)
        root_logger.setLevel(logging.INFO)
        # Propagate so pytest's caplog sees records
        root_logger.propagate = True
    return root_logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger that inherits level and handler from ``ringpath``.

    Args:
        name: Logger name, typically ``__name__`` of a ringpath module.
    """
    _root_logger()
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Set the level of the ``ringpath`` logger and its handlers."""
    root_logger = _root_logger()
    root_logger.setLevel(level)
    for handler in root_logger.handlers:
        handler.setLevel(level)


def enable_debug_logging() -> None:
    """Log walks and selections at DEBUG."""
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    """Return to INFO."""
    set_global_log_level(logging.INFO)
