from __future__ import annotations

import logging
import sys

LOGGER_NAME = "intervalkit"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

logger = logging.getLogger(LOGGER_NAME)


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Attach a stderr handler to the package logger (once) and set its level."""
    level = logging.DEBUG if verbose else logging.WARNING
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    for handler in logger.handlers:
        handler.setLevel(level)
    logger.setLevel(level)
    return logger
