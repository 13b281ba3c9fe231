"""
dss_http

Request helpers for DSS HTTP services: query/header accessors, the DSS
identifier headers, and JSON body parsing over any HttpRequestSource.
"""

from dss_http.adapters.in_memory import InMemoryRequest
from dss_http.adapters.starlette_request import StarletteRequestAdapter
from dss_http.contracts.content_types import ContentApplicationType
from dss_http.contracts.header_keys import DssHeaderKeys
from dss_http.contracts.request_helper import RequestHelper
from dss_http.contracts.request_source import HttpRequestSource
from dss_http.errors import InvalidArgumentError
from dss_http.request_helper import HttpRequestHelper
from dss_http.settings import Settings, get_settings

__all__ = [
    "ContentApplicationType",
    "DssHeaderKeys",
    "HttpRequestHelper",
    "HttpRequestSource",
    "InMemoryRequest",
    "InvalidArgumentError",
    "RequestHelper",
    "Settings",
    "StarletteRequestAdapter",
    "get_settings",
]
