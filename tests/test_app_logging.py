"""Tests for logging configuration."""

import logging

import pytest

from calorie_tracker.api.app import create_app
from calorie_tracker.app_logging import LOG_FORMAT, configure_logging


@pytest.fixture
def app_logger():
    logger = logging.getLogger("calorie_tracker")
    logger.handlers.clear()
    yield logger
    configure_logging()


def test_configure_logging_idempotent(app_logger) -> None:
    configure_logging()
    first_count = len(app_logger.handlers)

    configure_logging()
    second_count = len(app_logger.handlers)

    assert first_count == 1
    assert second_count == 1
    assert app_logger.handlers[0].formatter._fmt == LOG_FORMAT


def test_configure_logging_updates_level_on_repeat_calls(app_logger) -> None:
    configure_logging("debug")
    assert app_logger.level == logging.DEBUG

    configure_logging("WARNING")
    assert app_logger.level == logging.WARNING
    assert len(app_logger.handlers) == 1


def test_create_app_applies_configured_level(app_logger, container) -> None:
    container.settings.log_level = "ERROR"

    create_app(container)

    assert app_logger.level == logging.ERROR
