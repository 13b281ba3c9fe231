"""
dss_http.settings

Purpose:
    Centralized configuration for the request helper and its logging.
    Header names can be overridden per deployment without code changes.

Created:
    2026-10-19
"""

from __future__ import annotations

import logging
import os

from pydantic import BaseModel, Field, field_validator

from dss_http.contracts.content_types import ContentApplicationType
from dss_http.contracts.header_keys import DssHeaderKeys

ENV_PREFIX = "DSS_HTTP_"

# env suffix -> DssHeaderKeys field
_HEADER_ENV_FIELDS: dict[str, str] = {
    "TOUCHPOINT_ID_HEADER": "touchpoint_id",
    "CORRELATION_ID_HEADER": "correlation_id",
    "SUBCONTRACTOR_ID_HEADER": "subcontractor_id",
    "APIM_URL_HEADER": "apim_url",
}


class Settings(BaseModel):
    log_level: str = Field(default="INFO")
    json_content_type: str = Field(default=ContentApplicationType.APPLICATION_JSON.value)
    header_keys: DssHeaderKeys = Field(default_factory=DssHeaderKeys)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level


def _env(name: str) -> str | None:
    raw = os.getenv(f"{ENV_PREFIX}{name}")
    if raw is None:
        return None
    s = raw.strip()
    return s or None


def get_settings() -> Settings:
    values: dict = {}

    log_level = _env("LOG_LEVEL")
    if log_level:
        values["log_level"] = log_level

    header_overrides: dict[str, str] = {}
    for suffix, field in _HEADER_ENV_FIELDS.items():
        value = _env(suffix)
        if value is not None:
            header_overrides[field] = value
    if header_overrides:
        values["header_keys"] = DssHeaderKeys(**header_overrides)

    return Settings(**values)
