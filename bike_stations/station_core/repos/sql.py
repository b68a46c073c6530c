"""SQL station repository implementation.

This module implements ``StationRepository`` on top of the persistence port
``AsyncBaseRepository[StationRow]``; it never touches SQLAlchemy sessions
itself.

Usage
-----

- Create an async engine with ``bike_stations.core.database.create_engine``.
- Create tables with ``create_all`` (tests/dev).
- Create a session factory with ``create_sessionmaker``.
- Build the repository with ``build_station_repository``.

Uniqueness
----------

``station_id`` and ``external_station_id`` are guarded by unique constraints
in the database, so two concurrent ``add`` calls for the same key cannot both
succeed. When an insert is rejected the stored rows are consulted to report
which key collided, ``station_id`` first.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from bike_stations.core.database.entities.stations import StationRow
from bike_stations.core.database.errors import UniqueConstraintViolationError
from bike_stations.core.database.repositories.base import AsyncBaseRepository
from bike_stations.core.database.repositories.stations import StationRowRepository
from bike_stations.core.database.session import async_session_maker
from bike_stations.core.logging_config import get_logger
from bike_stations.core.models.domain import Station

from ..errors import (
    DuplicateExternalStationIdError,
    DuplicateStationIdError,
    StationAlreadyExistsError,
)
from .interfaces import StationRepository

logger = get_logger(__name__)


@dataclass(frozen=True)
class SqlStationRepository(StationRepository):
    """SQL implementation of ``StationRepository``."""

    store: AsyncBaseRepository[StationRow]

    async def add(self, station: Station) -> None:
        """
        Persist a new station with all of its value objects in one insert.

        Args:
            station: The station to insert.

        Raises:
            DuplicateStationIdError: ``station_id`` is already stored.
            DuplicateExternalStationIdError: the external station id is already stored.
        """
        try:
            await self.store.save(StationRow.from_domain(station))
        except UniqueConstraintViolationError as exc:
            error = await self._duplicate_error(station)
            if error is None:
                raise
            raise error from exc
        logger.info(f"Added station {station.station_id} (external id {station.external_station_id!r})")

    async def _duplicate_error(self, station: Station) -> Optional[StationAlreadyExistsError]:
        station_id = str(station.station_id)
        if await self.store.get_by_unique_field("station_id", station_id) is not None:
            logger.warning(f"Rejected station {station_id}: station id already stored")
            return DuplicateStationIdError(station_id)

        external_id = station.external_station_id
        if await self.store.get_by_unique_field("external_station_id", external_id) is not None:
            logger.warning(f"Rejected station {station_id}: external station id {external_id!r} already stored")
            return DuplicateExternalStationIdError(external_id)

        return None

    async def find_by_station_id(self, station_id: Union[UUID, str]) -> Optional[Station]:
        """
        Retrieve a station by its internal identifier.

        Args:
            station_id: A UUID or its string form. Strings that are not UUIDs match nothing.

        Returns:
            The Station if found, otherwise None.
        """
        try:
            key = str(station_id if isinstance(station_id, UUID) else UUID(station_id))
        except ValueError:
            logger.debug(f"Station id {station_id!r} is not a UUID")
            return None

        row = await self.store.get_by_unique_field("station_id", key)
        logger.debug(f"Lookup by station id {key}: {'hit' if row is not None else 'miss'}")
        return row.to_domain() if row is not None else None

    async def find_by_external_station_id(self, external_station_id: str) -> Optional[Station]:
        """
        Retrieve a station by its external identifier.

        Args:
            external_station_id: The identifier assigned by the upstream feed.

        Returns:
            The Station if found, otherwise None.
        """
        row = await self.store.get_by_unique_field("external_station_id", external_station_id)
        logger.debug(f"Lookup by external station id {external_station_id!r}: {'hit' if row is not None else 'miss'}")
        return row.to_domain() if row is not None else None

    async def find_all(self) -> list[Station]:
        """
        List all stations in insertion order.

        Returns:
            A list of Station objects.
        """
        rows = await self.store.list_all(order_by="id")
        return [row.to_domain() for row in rows]


def build_station_repository(
    *, session_factory: Optional[async_sessionmaker[AsyncSession]] = None
) -> SqlStationRepository:
    """
    Build a ``SqlStationRepository`` from a session factory.

    Args:
        session_factory: Async session factory; one session is opened per operation.
            Defaults to the factory bound to the configured ``DATABASE_URL``.

    Returns:
        The station repository.
    """
    return SqlStationRepository(store=StationRowRepository(session_factory or async_session_maker))
