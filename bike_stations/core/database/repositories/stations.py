"""
Station row repository implementation.

This module provides the SQL implementation of the persistence port for the
``stations`` table. Each method opens its own ``AsyncSession``, performs its
operation and commits, so every saved row is durable when the method returns.
"""

from __future__ import annotations

from typing import Any, List, Optional

from sqlalchemy import Table, UniqueConstraint
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlmodel import select

from bike_stations.core.logging_config import get_logger

from ..entities.stations import StationRow
from ..errors import UniqueConstraintViolationError
from .base import AsyncBaseRepository, QueryBuilder

logger = get_logger(__name__)

# SQLSTATE reported by PostgreSQL for unique_violation.
UNIQUE_VIOLATION_SQLSTATE = "23505"


def _is_unique_violation(exc: IntegrityError) -> bool:
    orig = exc.orig
    if getattr(orig, "sqlstate", None) == UNIQUE_VIOLATION_SQLSTATE:
        return True
    # sqlite3 only reports the kind of constraint in the message.
    return "UNIQUE constraint failed" in str(orig)


def _unique_columns(table: Table) -> set[str]:
    names = {column.name for column in table.columns if column.unique or column.primary_key}
    for constraint in table.constraints:
        if isinstance(constraint, UniqueConstraint) and len(constraint.columns) == 1:
            names.update(column.name for column in constraint.columns)
    return names


class StationRowRepository(AsyncBaseRepository[StationRow]):
    """Repository for ``stations`` rows using SQLModel."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        """Initialize repository with a session factory.

        Args:
            session_factory: Factory producing one async session per operation
        """
        super().__init__(session_factory, StationRow)
        self._unique_fields = _unique_columns(StationRow.__table__)

    async def save(self, row: StationRow) -> StationRow:
        """Insert a station row.

        The insert and the unique constraint checks on ``station_id`` and
        ``external_station_id`` happen in one transaction on the database
        side.

        Args:
            row: StationRow SQLModel instance

        Returns:
            Persisted StationRow with ``id`` populated

        Raises:
            UniqueConstraintViolationError: The row collides with a stored one
            IntegrityError: Any other constraint rejected the row
        """
        async with self.session_factory() as session:
            session.add(row)
            try:
                await session.commit()
            except IntegrityError as exc:
                await session.rollback()
                logger.debug(f"Insert into {StationRow.__tablename__} rejected: {exc.orig}")
                if not _is_unique_violation(exc):
                    raise
                raise UniqueConstraintViolationError(StationRow.__tablename__) from exc
            await session.refresh(row)
            return row

    async def get_by_id(self, row_id: Any) -> Optional[StationRow]:
        """Get a station row by its surrogate key.

        Args:
            row_id: Primary key value

        Returns:
            StationRow instance or None
        """
        async with self.session_factory() as session:
            return await session.get(StationRow, row_id)

    async def get_by_unique_field(self, field: str, value: Any) -> Optional[StationRow]:
        """Get a station row by ``station_id``, ``external_station_id`` or ``id``.

        Args:
            field: Unique column name
            value: Exact, case-sensitive value to match

        Returns:
            StationRow instance or None

        Raises:
            ValueError: ``field`` is not a unique column
        """
        if field not in self._unique_fields:
            raise ValueError(f"'{field}' is not a unique column of {StationRow.__tablename__}")
        stmt = select(StationRow).where(StationRow.__table__.columns[field] == value)
        async with self.session_factory() as session:
            result = await session.execute(stmt)
            return result.scalar_one_or_none()

    async def list_all(self, order_by: Optional[str] = None) -> List[StationRow]:
        """List every station row.

        Args:
            order_by: Column to sort ascending by; defaults to ``id`` (insertion order)

        Returns:
            List of StationRow instances
        """
        stmt = QueryBuilder.apply_order(select(StationRow), StationRow, order_by)
        async with self.session_factory() as session:
            result = await session.execute(stmt)
            return list(result.scalars().all())
