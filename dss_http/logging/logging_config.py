"""
dss_http.logging.logging_config

Purpose:
    Logging configuration for the dss_http logger tree.
    Ensures correlation_id is present on every record the library emits.

Notes:
    - Only the "dss_http" logger is configured; root handlers belong to the host app.
    - Safe to call more than once: handlers are replaced, not stacked.

Created:
    2026-10-19
"""

from __future__ import annotations

import logging

from dss_http.logging.correlation_id_filter import CorrelationIdFilter
from dss_http.settings import get_settings

LOGGER_NAMESPACE = "dss_http"

LOG_FORMAT = "%(asctime)s | %(levelname)s | correlation_id=%(correlation_id)s | %(name)s | %(message)s"


def _make_handler(level: int) -> logging.Handler:
    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT))
    handler.addFilter(CorrelationIdFilter())
    return handler


def configure_logging(level: str | int | None = None) -> logging.Logger:
    if level is None:
        level = get_settings().log_level
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    logger = logging.getLogger(LOGGER_NAMESPACE)
    logger.setLevel(level)
    logger.handlers.clear()
    logger.addHandler(_make_handler(level))
    logger.propagate = False
    return logger
