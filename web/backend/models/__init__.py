"""Data models for the cover API"""

from web.backend.models.cover import (
    CoverGeometryRequest,
    RectModel,
    SafeZonesModel,
    CoverGeometryResponse,
    SpineChartResponse,
)

__all__ = [
    "CoverGeometryRequest",
    "RectModel",
    "SafeZonesModel",
    "CoverGeometryResponse",
    "SpineChartResponse",
]
