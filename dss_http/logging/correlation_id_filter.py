"""
dss_http.logging.correlation_id_filter

Purpose:
    Logging filter that injects the DSS correlation id from contextvars into log records.

Created:
    2026-10-19
"""

from __future__ import annotations

import logging

from dss_http.logging.request_context import correlation_id_ctx_var


class CorrelationIdFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.correlation_id = correlation_id_ctx_var.get() or "-"
        return True
