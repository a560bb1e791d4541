"""Logging configuration for the ``argrecord`` logger tree.

Records go to standard error so they never mix with the printed record
on standard output.
"""

from __future__ import annotations

import logging
import sys

LOGGER_NAME = "argrecord"

_LOG_FORMAT = "%(asctime)s [%(levelname)8s] %(name)s:%(lineno)s %(message)s"


def _build_handler() -> logging.Handler:
    try:
        from rich.console import Console
        from rich.logging import RichHandler
    except ModuleNotFoundError:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        return handler
    return RichHandler(console=Console(stderr=True), show_path=False)


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Install a single stderr handler on the package logger.

    Level is ``DEBUG`` when *verbose* is set, ``WARNING`` otherwise.
    Calling again replaces the handler installed by the previous call.
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        if getattr(handler, "_argrecord_owned", False):
            logger.removeHandler(handler)

    handler = _build_handler()
    handler._argrecord_owned = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    return logger
