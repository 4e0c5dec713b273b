from __future__ import annotations

import logging

import pytest

from paragrapher import format_text_into_paragraphs
from paragrapher.utils.logging import ROOT_LOGGER_NAME, configure_logging, get_logger


def test_get_logger_namespacing() -> None:
    assert get_logger("custom").name == "paragrapher.custom"
    assert get_logger("paragrapher.layout.grouper").name == "paragrapher.layout.grouper"
    assert get_logger(ROOT_LOGGER_NAME).name == ROOT_LOGGER_NAME


def test_configure_logging_is_idempotent() -> None:
    logger = configure_logging(verbose=True)
    configure_logging(verbose=False)
    named = [h for h in logger.handlers if h.get_name() == "paragrapher-stderr"]
    assert len(named) == 1
    assert logger.level == logging.WARNING


def test_core_logs_at_debug(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger=ROOT_LOGGER_NAME):
        format_text_into_paragraphs("One. Two. Three.")
    assert "segmented 3 pieces into 3 sentences" in caplog.text
    assert "grouped sentences into 2 paragraphs" in caplog.text
