"""Station repository.

Stores ``Station`` aggregates and looks them up by internal or external
identifier. Duplicate identifiers are rejected with
``StationAlreadyExistsError`` subclasses.
"""

from .errors import (
    DuplicateExternalStationIdError,
    DuplicateStationIdError,
    StationAlreadyExistsError,
    StationError,
)
from .repos import SqlStationRepository, StationRepository, build_station_repository

__all__ = [
    "DuplicateExternalStationIdError",
    "DuplicateStationIdError",
    "SqlStationRepository",
    "StationAlreadyExistsError",
    "StationError",
    "StationRepository",
    "build_station_repository",
]
