"""
dss_http.errors

Purpose:
    Exception types raised by the request helper.
    Precondition failures are raised before the request is touched.

Notes:
    - Body deserialization failures are not wrapped here; they surface as
      pydantic.ValidationError so callers can map them to a 400 themselves.

Created:
    2026-10-19
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class InvalidArgumentError(ValueError):
    argument_name: str

    def __str__(self) -> str:
        return f"{self.argument_name} must not be None"
