from __future__ import annotations

import logging
from collections.abc import Generator

import pytest

from pqb import StatementBuilder


@pytest.fixture
def builder() -> StatementBuilder:
    return StatementBuilder()


@pytest.fixture
def restore_pqb_logger() -> Generator[logging.Logger, None, None]:
    logger = logging.getLogger("pqb")
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate
