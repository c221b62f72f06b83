"""Tests for logging utilities."""

import logging

from simcoe.utils.logging import (
    ContextFormatter,
    JSONFormatter,
    LogContext,
    configure_logging,
    get_logger,
)


def _simcoe_handlers():
    return [
        h
        for h in logging.getLogger("simcoe").handlers
        if getattr(h, "_simcoe_handler", False)
    ]


def test_get_logger_with_bound_fields():
    """Test getting a logger with bound context."""
    logger = get_logger("simcoe.test", tracker="mParticle")
    assert logger.name == "simcoe.test"
    assert logger.bound == {"tracker": "mParticle"}


def test_records_carry_bound_and_extra_context(caplog):
    """Test the record context merges bound fields and call extras."""
    caplog.set_level(logging.DEBUG, logger="simcoe")
    logger = get_logger("simcoe.test", tracker="mParticle")

    logger.debug("Forwarding event", extra={"event": "Button Tapped"})

    (record,) = caplog.records
    assert record.getMessage() == "Forwarding event"
    assert record.context == {"tracker": "mParticle", "event": "Button Tapped"}


def test_log_context_scopes_fields(caplog):
    """Test LogContext fields are only attached inside the block."""
    caplog.set_level(logging.INFO, logger="simcoe")
    logger = get_logger("simcoe.test")

    with LogContext(call="track_event"):
        logger.info("inside")
        with LogContext(call="log_error", attempt=2):
            logger.info("nested")
        logger.info("restored")
    logger.info("outside")

    contexts = [r.context for r in caplog.records]
    assert contexts == [
        {"call": "track_event"},
        {"call": "log_error", "attempt": 2},
        {"call": "track_event"},
        {},
    ]


def test_extra_overrides_context_fields(caplog):
    """Test call extras win over bound and scoped fields."""
    caplog.set_level(logging.INFO, logger="simcoe")
    logger = get_logger("simcoe.test", key="bound")

    with LogContext(key="scoped"):
        logger.info("msg", extra={"key": "call"})

    assert caplog.records[0].context == {"key": "call"}


def test_exception_includes_traceback(caplog):
    """Test exception logging attaches exc_info."""
    logger = get_logger("simcoe.test")
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        logger.exception("failed")

    (record,) = caplog.records
    assert record.levelno == logging.ERROR
    assert record.exc_info is not None


def test_set_level():
    """Test set_level changes the underlying logger."""
    logger = get_logger("simcoe.test.level")
    logger.set_level(logging.WARNING)
    assert logger.logger.level == logging.WARNING
    logger.set_level(logging.NOTSET)


def test_configure_logging_installs_single_handler():
    """Test repeated configuration replaces the package handler."""
    root = configure_logging("debug")
    assert root.name == "simcoe"
    assert root.level == logging.DEBUG
    assert isinstance(_simcoe_handlers()[0].formatter, ContextFormatter)

    configure_logging(logging.WARNING, json_output=True)
    handlers = _simcoe_handlers()
    assert len(handlers) == 1
    assert isinstance(handlers[0].formatter, JSONFormatter)
    assert root.level == logging.WARNING
