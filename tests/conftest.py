"""Shared test configuration."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from kubegen.observability.logging import ROOT_LOGGER


@pytest.fixture(autouse=True)
def _reset_kubegen_logger() -> Iterator[None]:
    """Undo handlers and levels installed by setup_logging()."""
    yield
    logger = logging.getLogger(ROOT_LOGGER)
    logger.handlers[:] = [logging.NullHandler()]
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
