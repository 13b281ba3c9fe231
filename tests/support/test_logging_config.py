"""
tests.support.test_logging_config

Purpose:
    Correlation id propagation into log records.

Created:
    2026-10-19
"""

from __future__ import annotations

import logging

import pytest

from dss_http.logging.correlation_id_filter import CorrelationIdFilter
from dss_http.logging.logging_config import LOGGER_NAMESPACE, configure_logging
from dss_http.logging.request_context import bind_correlation_id, correlation_id_ctx_var


@pytest.fixture(autouse=True)
def _reset_context():
    token = correlation_id_ctx_var.set(None)
    yield
    correlation_id_ctx_var.reset(token)


@pytest.fixture()
def restore_library_logger():
    logger = logging.getLogger(LOGGER_NAMESPACE)
    saved = (logger.level, list(logger.handlers), logger.propagate)
    yield
    logger.setLevel(saved[0])
    logger.handlers[:] = saved[1]
    logger.propagate = saved[2]


def _record() -> logging.LogRecord:
    return logging.LogRecord("dss_http.test", logging.INFO, __file__, 1, "hello", None, None)


def test_filter_defaults_to_dash() -> None:
    record = _record()

    assert CorrelationIdFilter().filter(record) is True
    assert record.correlation_id == "-"


def test_bind_correlation_id_feeds_filter(helper, request_factory) -> None:
    req = request_factory(headers={"DssCorrelationId": "abc-123"})

    assert bind_correlation_id(helper, req) == "abc-123"

    record = _record()
    CorrelationIdFilter().filter(record)
    assert record.correlation_id == "abc-123"


def test_bind_correlation_id_without_header(helper, request_factory) -> None:
    assert bind_correlation_id(helper, request_factory()) == ""
    assert correlation_id_ctx_var.get() is None


def test_configure_logging_is_idempotent(restore_library_logger) -> None:
    logger = configure_logging("DEBUG")
    configure_logging("DEBUG")

    assert logger.name == LOGGER_NAMESPACE
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1
    assert any(isinstance(f, CorrelationIdFilter) for f in logger.handlers[0].filters)
    assert logger.propagate is False


def test_configure_logging_reads_level_from_settings(monkeypatch, restore_library_logger) -> None:
    monkeypatch.setenv("DSS_HTTP_LOG_LEVEL", "WARNING")

    logger = configure_logging()

    assert logger.level == logging.WARNING
    assert logger.handlers[0].level == logging.WARNING
