"""
dss_http.contracts.request_helper

Purpose:
    Public surface of the request helper.
    Handlers depend on this protocol so tests can swap in a stub helper.
"""

from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

from dss_http.contracts.request_source import HttpRequestSource

T = TypeVar("T")


@runtime_checkable
class RequestHelper(Protocol):
    async def read_json_body(self, request: HttpRequestSource | None, shape: type[T]) -> T: ...

    def set_json_content_type(self, request: HttpRequestSource | None) -> None: ...

    def get_query_value(self, request: HttpRequestSource | None, key: str) -> str: ...

    def get_header_value(self, request: HttpRequestSource | None, key: str) -> str: ...

    def get_touchpoint_id(self, request: HttpRequestSource | None) -> str: ...

    def get_correlation_id(self, request: HttpRequestSource | None) -> str: ...

    def get_subcontractor_id(self, request: HttpRequestSource | None) -> str: ...

    def get_apim_url(self, request: HttpRequestSource | None) -> str: ...
