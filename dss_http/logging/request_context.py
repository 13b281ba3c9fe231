"""
dss_http.logging.request_context

Purpose:
    Request-scoped context storage using contextvars.
    Lets the DSS correlation id show up in every log line of a request.

Created:
    2026-10-19
"""

from __future__ import annotations

import contextvars
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from dss_http.contracts.request_helper import RequestHelper
    from dss_http.contracts.request_source import HttpRequestSource

correlation_id_ctx_var: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "dss_correlation_id",
    default=None,
)


def bind_correlation_id(helper: RequestHelper, request: HttpRequestSource | None) -> str:
    """
    Read the correlation id off the request and store it for log records.
    An absent header binds None so records fall back to "-".
    """
    correlation_id = helper.get_correlation_id(request)
    correlation_id_ctx_var.set(correlation_id or None)
    return correlation_id
