"""
Base repository interfaces and utilities.

This module provides the persistence port that domain repositories depend on,
plus query helpers shared by its SQL implementations. Built with async
SQLAlchemy and SQLModel entities.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Generic, List, Optional, Type, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlmodel import SQLModel

# Generic type for SQLModel entities
EntityType = TypeVar("EntityType", bound=SQLModel)


class AsyncBaseRepository(ABC, Generic[EntityType]):
    """Async persistence port over one SQLModel entity.

    Implementations open a session per call from ``session_factory``; the
    session is never held between calls.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession], model: Type[EntityType]) -> None:
        """Initialize repository with a session factory and SQLModel entity class.

        Args:
            session_factory: Factory producing async sessions, one per operation
            model: SQLModel entity class for this repository
        """
        self.session_factory = session_factory
        self.model = model

    @abstractmethod
    async def save(self, entity: EntityType) -> EntityType:
        """Insert a new entity record and commit it.

        Args:
            entity: SQLModel instance to persist

        Returns:
            Persisted entity with generated fields populated

        Raises:
            UniqueConstraintViolationError: A unique constraint rejected the insert
        """

    @abstractmethod
    async def get_by_id(self, entity_id: Any) -> Optional[EntityType]:
        """Get entity by its primary key.

        Args:
            entity_id: Primary key value

        Returns:
            Entity instance or None if not found
        """

    @abstractmethod
    async def get_by_unique_field(self, field: str, value: Any) -> Optional[EntityType]:
        """Get entity by the value of a column declared unique.

        Args:
            field: Name of a unique column
            value: Exact value to match

        Returns:
            Entity instance or None if not found

        Raises:
            ValueError: ``field`` is not a unique column of the entity
        """

    @abstractmethod
    async def list_all(self, order_by: Optional[str] = None) -> List[EntityType]:
        """List every entity.

        Args:
            order_by: Column to sort ascending by; defaults to the primary key

        Returns:
            List of entity instances
        """


class QueryBuilder:
    """Statement helpers shared by SQL implementations of the port."""

    @staticmethod
    def apply_order(stmt, model: Type[EntityType], order_by: Optional[str]):
        """Order a select statement ascending by a column.

        Args:
            stmt: SQLModel select statement
            model: SQLModel entity class
            order_by: Column name, or None for the primary key

        Returns:
            Modified select statement with ordering applied

        Raises:
            ValueError: ``order_by`` is not a column of the entity
        """
        table = model.__table__
        if order_by is None:
            return stmt.order_by(*table.primary_key.columns)
        if order_by not in table.columns:
            raise ValueError(f"'{order_by}' is not a column of {table.name}")
        return stmt.order_by(table.columns[order_by])
