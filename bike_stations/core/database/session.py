"""
Global database session and engine management.

This module manages the global AsyncEngine and async_sessionmaker instances
that are used throughout the application for database access.
"""

from __future__ import annotations

from bike_stations.core.config import settings

from .utils import create_all, create_engine, create_sessionmaker

# Create global engine and session factory
engine = create_engine(settings.database_url, echo=settings.sql_echo)
async_session_maker = create_sessionmaker(engine)


async def init_db() -> None:
    """
    Initialize the database.

    Creates the tables of the ORM metadata on the globally configured engine
    if they do not exist yet.
    """
    await create_all(engine)
