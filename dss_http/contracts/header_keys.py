"""
dss_http.contracts.header_keys

Purpose:
    Central definition of the DSS identifier headers threaded through services.
    Keeps header names in one place instead of scattered string literals.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DssHeaderKeys:
    touchpoint_id: str = "TouchpointId"
    correlation_id: str = "DssCorrelationId"
    subcontractor_id: str = "SubcontractorId"
    apim_url: str = "apimurl"
