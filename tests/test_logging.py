"""Test the centralized logging functionality."""

import logging
from io import StringIO

import pytest

from pathring.logging import (
    configure_from_flags,
    get_logger,
    reset_logging,
    set_global_log_level,
    setup_root_logger,
)


@pytest.fixture(autouse=True)
def _fresh_logging():
    yield
    reset_logging()
    setup_root_logger()


def test_centralized_logging():
    """Child loggers honour the root level."""
    logger = get_logger("pathring.test")

    log_capture = StringIO()
    handler = logging.StreamHandler(log_capture)
    handler.setLevel(logging.DEBUG)
    logger.handlers.clear()
    logger.addHandler(handler)

    set_global_log_level(logging.INFO)
    logger.info("Test info message")
    assert "Test info message" in log_capture.getvalue()

    log_capture.seek(0)
    log_capture.truncate(0)
    logger.debug("Test debug message")
    assert "Test debug message" not in log_capture.getvalue()

    set_global_log_level(logging.DEBUG)
    logger.debug("Test debug message after enable")
    assert "Test debug message after enable" in log_capture.getvalue()
    logger.removeHandler(handler)


def test_logger_naming():
    assert get_logger("pathring.closure.test").name == "pathring.closure.test"


def test_single_root_handler():
    setup_root_logger()
    setup_root_logger()
    assert len(logging.getLogger("pathring").handlers) == 1


def test_custom_handler_and_format():
    reset_logging()
    capture = StringIO()
    setup_root_logger(
        level=logging.DEBUG,
        format_string="%(levelname)s|%(message)s",
        handler=logging.StreamHandler(capture),
    )
    get_logger("pathring.custom").warning("hello")
    assert capture.getvalue() == "WARNING|hello\n"


def test_set_global_log_level_updates_handlers():
    set_global_log_level(logging.WARNING)
    root = logging.getLogger("pathring")
    assert root.level == logging.WARNING
    assert all(h.level == logging.WARNING for h in root.handlers)


@pytest.mark.parametrize(
    "verbose, quiet, expected",
    [
        (False, False, logging.INFO),
        (True, False, logging.DEBUG),
        (False, True, logging.WARNING),
        (True, True, logging.DEBUG),
    ],
)
def test_configure_from_flags(verbose, quiet, expected):
    assert configure_from_flags(verbose=verbose, quiet=quiet) == expected
    assert logging.getLogger("pathring").level == expected


def test_reset_logging():
    reset_logging()
    root = logging.getLogger("pathring")
    assert root.handlers == []
    assert root.level == logging.NOTSET
