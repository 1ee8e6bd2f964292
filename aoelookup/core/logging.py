"""Logging setup shared by the application entry points."""

from __future__ import annotations

import logging
import sys

from .config import DEBUG

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(name: str = "aoelookup") -> logging.Logger:
    """Attach a stdout handler to the package logger once."""

    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    level = logging.DEBUG if DEBUG else logging.INFO
    logger.setLevel(level)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)
    return logger


__all__ = ["setup_logging"]
