"""
dss_http.request_helper

Purpose:
    Convenience accessors over an incoming HTTP request: query values, headers,
    the DSS identifier headers, and JSON body parsing.

Notes:
    - Every accessor rejects a None request with InvalidArgumentError before reading anything.
    - Missing keys come back as "" rather than None so handlers can compare directly.
    - When a key has several values only the first is returned.
    - read_json_body has no timeout; wrap it in asyncio.wait_for if the caller needs one.

Created:
    2026-10-19
"""

from __future__ import annotations

import functools
import logging
from typing import Any, TypeVar

from pydantic import TypeAdapter

from dss_http.contracts.content_types import ContentApplicationType
from dss_http.contracts.header_keys import DssHeaderKeys
from dss_http.contracts.request_source import HttpRequestSource
from dss_http.errors import InvalidArgumentError
from dss_http.settings import Settings

logger = logging.getLogger(__name__)

T = TypeVar("T")


@functools.lru_cache(maxsize=128)
def _type_adapter(shape: Any) -> TypeAdapter:
    return TypeAdapter(shape)


def _require_request(request: HttpRequestSource | None) -> HttpRequestSource:
    if request is None:
        raise InvalidArgumentError("request")
    return request


class HttpRequestHelper:
    def __init__(
        self,
        header_keys: DssHeaderKeys | None = None,
        json_content_type: str = ContentApplicationType.APPLICATION_JSON.value,
    ) -> None:
        self._keys = header_keys or DssHeaderKeys()
        self._json_content_type = json_content_type

    @classmethod
    def from_settings(cls, settings: Settings) -> HttpRequestHelper:
        return cls(header_keys=settings.header_keys, json_content_type=settings.json_content_type)

    @property
    def header_keys(self) -> DssHeaderKeys:
        return self._keys

    async def read_json_body(self, request: HttpRequestSource | None, shape: type[T]) -> T:
        """
        Read the whole body stream and validate it as JSON into `shape`.

        Raises:
            InvalidArgumentError: request or its body stream is None.
            pydantic.ValidationError: body is not valid JSON or does not fit `shape`.
        """
        req = _require_request(request)
        body = req.body
        if body is None:
            raise InvalidArgumentError("request.body")

        self.set_json_content_type(req)

        chunks = [chunk async for chunk in body]
        text = b"".join(chunks).decode("utf-8-sig")

        return _type_adapter(shape).validate_json(text)

    def set_json_content_type(self, request: HttpRequestSource | None) -> None:
        req = _require_request(request)

        previous = req.content_type
        if previous and previous != self._json_content_type:
            logger.info("Overwriting content type with %s", self._json_content_type)

        req.content_type = self._json_content_type

    def get_query_value(self, request: HttpRequestSource | None, key: str) -> str:
        req = _require_request(request)

        values = req.get_query_values(key)
        if not values:
            logger.debug("Query parameter %s not present", key)
            return ""
        return values[0] or ""

    def get_header_value(self, request: HttpRequestSource | None, key: str) -> str:
        req = _require_request(request)

        values = req.get_header_values(key)
        if not values:
            logger.debug("Header %s not present", key)
            return ""
        return values[0] or ""

    def get_touchpoint_id(self, request: HttpRequestSource | None) -> str:
        return self.get_header_value(request, self._keys.touchpoint_id)

    def get_correlation_id(self, request: HttpRequestSource | None) -> str:
        return self.get_header_value(request, self._keys.correlation_id)

    def get_subcontractor_id(self, request: HttpRequestSource | None) -> str:
        return self.get_header_value(request, self._keys.subcontractor_id)

    def get_apim_url(self, request: HttpRequestSource | None) -> str:
        apim_url = self.get_header_value(request, self._keys.apim_url)

        # only one slash: "http://host//" keeps its last one
        if apim_url.endswith("/"):
            logger.debug("Stripping trailing slash from %s header", self._keys.apim_url)
            apim_url = apim_url[:-1]

        return apim_url
