"""Logging configuration for the API process.

Usage example:
    from logging_setup import configure_logging

    configure_logging("DEBUG")
"""

from __future__ import annotations

import logging
import time

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_LOG_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S%z"
_HANDLER_NAME = "resume-matcher"


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Attach a single UTC stream handler to the root logger.

    Safe to call more than once: the handler is only installed the first time,
    later calls just update the level.
    """
    root = logging.getLogger()
    if not any(h.get_name() == _HANDLER_NAME for h in root.handlers):
        handler = logging.StreamHandler()
        handler.set_name(_HANDLER_NAME)
        formatter = logging.Formatter(fmt=_LOG_FORMAT, datefmt=_LOG_DATE_FORMAT)
        formatter.converter = time.gmtime
        handler.setFormatter(formatter)
        root.addHandler(handler)
    root.setLevel(level.upper())
    return root
