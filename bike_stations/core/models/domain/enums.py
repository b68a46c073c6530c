"""Domain enums for station models."""

from __future__ import annotations

from enum import Enum


class StationDetailType(str, Enum):
    """Kind of vehicle a station docks."""

    bike = "BIKE"
    electric_bike = "ELECTRIC_BIKE"
