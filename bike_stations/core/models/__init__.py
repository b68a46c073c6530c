"""Core models and schemas for station data."""

from __future__ import annotations

from .base import BaseSchema
from .domain import (
    Location,
    Station,
    StationDetail,
    StationDetailType,
    StationExternalData,
)

__all__ = [
    "BaseSchema",
    "Location",
    "Station",
    "StationDetail",
    "StationDetailType",
    "StationExternalData",
]
