"""
dss_http.adapters.in_memory

Purpose:
    Framework-free HttpRequestSource backed by Starlette's datastructures.
    Used by tests and by callers that build a request outside a web server
    (queue consumers replaying an HTTP payload, CLI tools).

Notes:
    - query_string accepts the raw form with or without the leading '?'.
    - Mapping values may be a single string or a sequence of strings.
    - body=None models a request with no body stream.
    - Header names and values travel as latin-1 on the wire, same as a real
      ASGI request; anything outside it is rejected with ValueError.

Created:
    2026-10-19
"""

from __future__ import annotations

from typing import AsyncIterator, Mapping, Sequence, Union

from starlette.datastructures import MutableHeaders, QueryParams

MultiValues = Mapping[str, Union[str, Sequence[str]]]

_CONTENT_TYPE = "content-type"


def _encode_header(key: str, value: str) -> tuple[bytes, bytes]:
    try:
        return key.lower().encode("latin-1"), value.encode("latin-1")
    except UnicodeEncodeError as e:
        raise ValueError(f"Header {key!r} is not latin-1 encodable: {value!r}") from e


def _multi_items(values: MultiValues | Sequence[tuple[str, str]] | None) -> list[tuple[str, str]]:
    if values is None:
        return []
    if not isinstance(values, Mapping):
        return [(str(k), str(v)) for k, v in values]

    items: list[tuple[str, str]] = []
    for key, value in values.items():
        if isinstance(value, str):
            items.append((key, value))
        else:
            items.extend((key, v) for v in value)
    return items


class InMemoryRequest:
    def __init__(
        self,
        *,
        content_type: str | None = None,
        body: bytes | str | None = b"",
        query_string: str = "",
        query: MultiValues | Sequence[tuple[str, str]] | None = None,
        headers: MultiValues | Sequence[tuple[str, str]] | None = None,
    ) -> None:
        query_items = list(QueryParams(query_string.removeprefix("?")).multi_items())
        query_items.extend(_multi_items(query))
        self._query = QueryParams(query_items)

        self._headers = MutableHeaders(
            raw=[_encode_header(k, v) for k, v in _multi_items(headers)]
        )
        if content_type is not None:
            self._headers[_CONTENT_TYPE] = content_type

        self._body = body.encode("utf-8") if isinstance(body, str) else body

    @property
    def content_type(self) -> str | None:
        return self._headers.get(_CONTENT_TYPE)

    @content_type.setter
    def content_type(self, value: str | None) -> None:
        if value is None:
            if _CONTENT_TYPE in self._headers:
                del self._headers[_CONTENT_TYPE]
            return
        self._headers[_CONTENT_TYPE] = value

    @property
    def body(self) -> AsyncIterator[bytes] | None:
        if self._body is None:
            return None
        return self._iter_body(self._body)

    @staticmethod
    async def _iter_body(payload: bytes) -> AsyncIterator[bytes]:
        yield payload

    def get_query_values(self, key: str) -> list[str]:
        return self._query.getlist(key)

    def get_header_values(self, key: str) -> list[str]:
        return self._headers.getlist(key)
