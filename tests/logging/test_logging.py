"""Tests for centralized logging behavior and configuration."""

import logging
from io import StringIO

import pytest

from rangekit.logging import (
    disable_debug_logging,
    enable_debug_logging,
    get_logger,
    reset_logging,
    set_global_log_level,
    setup_root_logger,
)


@pytest.fixture(autouse=True)
def _reset_logging_each_test():
    """Reset logging state before and after each test to avoid cross-test bleed."""
    reset_logging()
    yield
    reset_logging()


def test_effective_levels_enable_disable():
    """INFO by default, DEBUG after enable, back to INFO after disable."""
    logger = get_logger("rangekit.test")

    capture = StringIO()
    handler = logging.StreamHandler(capture)
    handler.setLevel(logging.DEBUG)
    logger.handlers.clear()
    logger.addHandler(handler)

    # INFO should be emitted by default
    logger.info("info-1")
    assert "info-1" in capture.getvalue()

    # DEBUG is filtered at the default level
    capture.seek(0)
    capture.truncate(0)
    logger.debug("debug-1")
    assert "debug-1" not in capture.getvalue()

    enable_debug_logging()
    logger.debug("debug-2")
    assert "debug-2" in capture.getvalue()

    # Back to INFO
    capture.seek(0)
    capture.truncate(0)
    disable_debug_logging()
    logger.debug("debug-3")
    assert "debug-3" not in capture.getvalue()


def test_global_level_propagates_to_children_and_new_loggers():
    """Changing global level updates existing and new child loggers."""
    logger1 = get_logger("rangekit.module1")
    logger2 = get_logger("rangekit.module2")

    assert logger1.getEffectiveLevel() == logging.INFO
    assert logger2.getEffectiveLevel() == logging.INFO

    set_global_log_level(logging.WARNING)
    assert logger1.getEffectiveLevel() == logging.WARNING
    assert logger2.getEffectiveLevel() == logging.WARNING

    # Loggers created afterwards inherit the new level too
    logger3 = get_logger("rangekit.module3")
    assert logger3.getEffectiveLevel() == logging.WARNING


def test_setup_root_logger_idempotent_no_duplicate_handlers():
    """Repeated setup should not accumulate handlers."""
    capture = StringIO()
    handler = logging.StreamHandler(capture)
    setup_root_logger(level=logging.INFO, handler=handler)

    root_logger = logging.getLogger("rangekit")
    assert len(root_logger.handlers) == 1

    setup_root_logger(level=logging.DEBUG)
    assert len(root_logger.handlers) == 1

    set_global_log_level(logging.ERROR)
    assert root_logger.level == logging.ERROR


def test_custom_format_string_applied():
    """Custom format string is respected by the root handler."""
    capture = StringIO()
    handler = logging.StreamHandler(capture)
    fmt = "LEVEL:%(levelname)s|NAME:%(name)s|MSG:%(message)s"
    setup_root_logger(level=logging.INFO, format_string=fmt, handler=handler)

    logger = get_logger("rangekit.test.format")
    logger.info("hello")
    out = capture.getvalue()
    assert "LEVEL:INFO" in out
    assert "NAME:rangekit.test.format" in out
    assert "MSG:hello" in out


def test_traversal_is_silent_at_default_level():
    """Walking a zip emits nothing through the rangekit handler at INFO."""
    from rangekit import zip_view

    capture = StringIO()
    setup_root_logger(handler=logging.StreamHandler(capture))

    assert list(zip_view([1, 2], "ab")) == [(1, "a"), (2, "b")]
    assert capture.getvalue() == ""


def test_zip_construction_logged_at_debug():
    """Building a zip records its tier at DEBUG."""
    from rangekit import zip_view

    capture = StringIO()
    setup_root_logger(handler=logging.StreamHandler(capture))
    enable_debug_logging()

    zip_view([1], iter([2]))
    assert "zip over 2 range(s), category SINGLE_PASS" in capture.getvalue()


def test_contract_violation_is_logged_at_debug(caplog):
    """Contract violations leave a DEBUG record on the module logger."""
    from rangekit import IndexCursor, PreconditionError

    enable_debug_logging()
    cursor = IndexCursor([1], 1)
    with caplog.at_level(logging.DEBUG, logger="rangekit"):
        with pytest.raises(PreconditionError):
            cursor.increment()
    assert any(
        r.name == "rangekit.cursors.index" and "increment past end" in r.getMessage()
        for r in caplog.records
    )
