"""
dss_http.contracts.request_source

Purpose:
    Minimal read/write surface of an incoming HTTP request.
    The request helper only talks to this protocol, so it can run against
    a Starlette request, an in-memory fake, or anything else that fits.

Notes:
    - get_*_values return every value for a key, in arrival order.
      An absent key yields an empty sequence.
    - Header lookup is case-insensitive; query lookup is not.
    - body is None when the request carries no body stream at all.

Created:
    2026-10-19
"""

from __future__ import annotations

from typing import AsyncIterator, Protocol, Sequence, runtime_checkable


@runtime_checkable
class HttpRequestSource(Protocol):
    content_type: str | None

    @property
    def body(self) -> AsyncIterator[bytes] | None: ...

    def get_query_values(self, key: str) -> Sequence[str]: ...

    def get_header_values(self, key: str) -> Sequence[str]: ...
