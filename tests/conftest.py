from __future__ import annotations

import logging
from typing import Iterator

import pytest

from paragrapher.utils.logging import ROOT_LOGGER_NAME


@pytest.fixture(autouse=True)
def _restore_package_logger() -> Iterator[None]:
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    level = logger.level
    handlers = list(logger.handlers)
    yield
    logger.setLevel(level)
    logger.handlers[:] = handlers
