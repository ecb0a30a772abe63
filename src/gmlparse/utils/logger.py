from __future__ import annotations

import logging
import os

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Return a logger with a single stream handler.

    The level is read from GMLPARSE_LOG_LEVEL (default WARNING).
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(os.environ.get("GMLPARSE_LOG_LEVEL", "WARNING").upper())
    return logger
