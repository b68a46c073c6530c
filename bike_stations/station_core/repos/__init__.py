"""Station repository interface and SQL implementation."""

from .interfaces import StationRepository
from .sql import SqlStationRepository, build_station_repository

__all__ = [
    "SqlStationRepository",
    "StationRepository",
    "build_station_repository",
]
