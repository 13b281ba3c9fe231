"""
tests.conftest

Shared pytest fixtures for request helper tests.

Created:
    2026-10-19
"""

from __future__ import annotations

from urllib.parse import urlencode

import pytest
from starlette.requests import Request

from dss_http.adapters.in_memory import InMemoryRequest
from dss_http.adapters.starlette_request import StarletteRequestAdapter
from dss_http.contracts.content_types import ContentApplicationType
from dss_http.request_helper import HttpRequestHelper


@pytest.fixture()
def helper() -> HttpRequestHelper:
    return HttpRequestHelper()


@pytest.fixture()
def request_factory():
    """
    Factory fixture that builds an InMemoryRequest.

    Defaults to a JSON request with an empty body, matching what a handler
    sees for a bare POST.
    """

    def _make(**kwargs) -> InMemoryRequest:
        kwargs.setdefault("content_type", ContentApplicationType.APPLICATION_JSON.value)
        return InMemoryRequest(**kwargs)

    return _make


@pytest.fixture()
def starlette_request_factory():
    """
    Factory fixture that builds a real Starlette Request from a raw ASGI scope.

    IMPORTANT:
        The body is delivered through `receive`, so it can only be streamed once.
        Call the helper inside asyncio.run when reading it.
    """

    def _make(
        *,
        headers: list[tuple[str, str]] | None = None,
        query: list[tuple[str, str]] | None = None,
        body: bytes = b"",
        method: str = "POST",
    ) -> StarletteRequestAdapter:
        scope = {
            "type": "http",
            "method": method,
            "path": "/",
            "query_string": urlencode(query or []).encode("latin-1"),
            "headers": [
                (k.lower().encode("latin-1"), v.encode("latin-1")) for k, v in (headers or [])
            ],
        }

        async def receive() -> dict:
            return {"type": "http.request", "body": body, "more_body": False}

        return StarletteRequestAdapter(Request(scope, receive))

    return _make
