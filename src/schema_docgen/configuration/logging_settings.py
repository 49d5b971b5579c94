"""Logging setup for command line runs."""

from __future__ import annotations

import logging

_HANDLER_NAME = "schema_docgen.cli"
_LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def configure_logging(debug: bool) -> None:
    """Send package log records to the current stderr, at DEBUG when `debug` is set."""
    logger = logging.getLogger("schema_docgen")
    logger.setLevel(logging.DEBUG if debug else logging.WARNING)
    for handler in list(logger.handlers):
        if handler.get_name() == _HANDLER_NAME:
            logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    logger.addHandler(handler)
