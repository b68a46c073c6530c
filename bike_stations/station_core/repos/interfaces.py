"""Repository interface contract.

Callers depend on this Protocol instead of a concrete persistence
implementation.

Contract guidelines
-------------------

- All methods are async.
- Implementations must not leak sessions or transactions to the caller.
- ``add`` is insert-only; stations are never updated or removed through it.
- Lookups that find nothing return ``None`` rather than raising.
"""

from __future__ import annotations

from typing import Optional, Protocol, Union
from uuid import UUID

from bike_stations.core.models.domain import Station


class StationRepository(Protocol):
    """Persist and query bike-share stations."""

    async def add(self, station: Station) -> None:
        """
        Store a new station.

        Args:
            station: The fully built station to persist.

        Raises:
            DuplicateStationIdError: A station with the same ``station_id`` exists.
            DuplicateExternalStationIdError: A station with the same external id exists.
        """
        ...

    async def find_by_station_id(self, station_id: Union[UUID, str]) -> Optional[Station]:
        """
        Retrieve a station by its internal identifier.

        Args:
            station_id: The station identifier.

        Returns:
            The Station if found, else None.
        """
        ...

    async def find_by_external_station_id(self, external_station_id: str) -> Optional[Station]:
        """
        Retrieve a station by the identifier the upstream feed assigned to it.

        Args:
            external_station_id: The external identifier, matched exactly.

        Returns:
            The Station if found, else None.
        """
        ...

    async def find_all(self) -> list[Station]:
        """
        List every stored station.

        Returns:
            All stations, in the order they were added.
        """
        ...
