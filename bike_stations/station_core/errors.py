"""Error types for the station repository.

Both duplicate errors derive from ``StationAlreadyExistsError`` so callers
can handle either collision with a single ``except`` clause.
"""

from __future__ import annotations

from typing import Union
from uuid import UUID


class StationError(Exception):
    """Base error for all station exceptions."""


class StationAlreadyExistsError(StationError):
    """Raised when a station cannot be added because it collides with a stored one."""


class DuplicateStationIdError(StationAlreadyExistsError):
    """Raised when the station id is already taken."""

    def __init__(self, station_id: Union[UUID, str]) -> None:
        super().__init__(f'A station already exists with station Id "{station_id}".')
        self.station_id = str(station_id)


class DuplicateExternalStationIdError(StationAlreadyExistsError):
    """Raised when the external station id is already taken."""

    def __init__(self, external_station_id: str) -> None:
        super().__init__(f'A station already exists with external station Id "{external_station_id}"')
        self.external_station_id = external_station_id
