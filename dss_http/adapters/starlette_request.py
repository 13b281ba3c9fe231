"""
dss_http.adapters.starlette_request

Purpose:
    Adapts a Starlette (or FastAPI) Request to the HttpRequestSource protocol.

Notes:
    - Headers are read straight from the ASGI scope so a content type written
      through this adapter is visible to later lookups on the same adapter.
    - Request.headers caches its Headers on first access; if the handler already
      touched request.headers, that cached view will not see a content type
      written here. Read it back through the adapter instead.

Created:
    2026-10-19
"""

from __future__ import annotations

from typing import AsyncIterator

from starlette.datastructures import Headers, MutableHeaders
from starlette.requests import Request

_CONTENT_TYPE = "content-type"


class StarletteRequestAdapter:
    def __init__(self, request: Request) -> None:
        self._request = request

    @property
    def request(self) -> Request:
        return self._request

    @property
    def content_type(self) -> str | None:
        return Headers(scope=self._request.scope).get(_CONTENT_TYPE)

    @content_type.setter
    def content_type(self, value: str | None) -> None:
        headers = MutableHeaders(scope=self._request.scope)
        if value is None:
            if _CONTENT_TYPE in headers:
                del headers[_CONTENT_TYPE]
            return
        headers[_CONTENT_TYPE] = value

    @property
    def body(self) -> AsyncIterator[bytes]:
        return self._request.stream()

    def get_query_values(self, key: str) -> list[str]:
        return self._request.query_params.getlist(key)

    def get_header_values(self, key: str) -> list[str]:
        return Headers(scope=self._request.scope).getlist(key)
