"""Shared pytest fixtures and configuration for the argrecord test suite.

Guidelines
----------
* Core tests are pure function calls; no output capture needed.
* CLI tests drive :func:`argrecord.cli.app.main` in-process and read
  standard output through ``capsys``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from argrecord.cli.logging_setup import LOGGER_NAME


@pytest.fixture(autouse=True)
def _reset_package_logger() -> Iterator[None]:
    """Drop handlers installed by earlier ``main`` calls."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
