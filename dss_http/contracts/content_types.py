"""
dss_http.contracts.content_types

Purpose:
    Content-type values the request helper writes or expects to overwrite.
"""

from __future__ import annotations

from enum import Enum


class ContentApplicationType(str, Enum):
    APPLICATION_JSON = "application/json"
    APPLICATION_XML = "application/xml"
