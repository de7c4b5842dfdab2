"""Unit tests for src/core/logging_config.py"""

import logging

from src.core.logging_config import RequestIdFilter, configure_logging, request_id_var


def test_filter_adds_request_id() -> None:
    record = logging.LogRecord("src.test", logging.INFO, __file__, 1, "hello", None, None)
    token = request_id_var.set("req-123")
    try:
        assert RequestIdFilter().filter(record) is True
    finally:
        request_id_var.reset(token)
    assert record.request_id == "req-123"


def test_default_request_id() -> None:
    record = logging.LogRecord("src.test", logging.INFO, __file__, 1, "hello", None, None)
    RequestIdFilter().filter(record)
    assert record.request_id == "-"


def test_configure_logging_is_idempotent() -> None:
    configure_logging("DEBUG")
    configure_logging("DEBUG")
    logger = logging.getLogger("src")
    handlers = [
        h for h in logger.handlers if any(isinstance(f, RequestIdFilter) for f in h.filters)
    ]
    assert len(handlers) == 1
    assert logger.level == logging.DEBUG
