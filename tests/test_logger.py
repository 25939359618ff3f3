"""Tests for the shared logging setup."""

from __future__ import annotations

import logging

import pytest

from utils import logger as catalog_logger


@pytest.fixture(autouse=True)
def restore_level():
    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)


def _catalog_handlers() -> list[logging.Handler]:
    return [h for h in logging.getLogger().handlers if h is catalog_logger._handler]


def test_get_logger_is_named_and_configured():
    log = catalog_logger.get_logger("repositories.genre_repo")

    assert log.name == "repositories.genre_repo"
    assert len(_catalog_handlers()) == 1


def test_configure_logging_does_not_stack_handlers():
    catalog_logger.configure_logging("DEBUG")
    catalog_logger.configure_logging("WARNING")

    assert len(_catalog_handlers()) == 1
    assert logging.getLogger().level == logging.WARNING


@pytest.mark.parametrize("name, expected", [
    ("debug", logging.DEBUG),
    ("ERROR", logging.ERROR),
    ("verbose", logging.INFO),
    ("BASIC_FORMAT", logging.INFO),
])
def test_level_names(name, expected):
    catalog_logger.configure_logging(name)

    assert logging.getLogger().level == expected
