"""
Database layer for bike-stations.

This package provides a unified location for database entities and
repositories, organized by table.

Structure:
- entities/: Database entity models organized by table
- repositories/: Persistence port and its SQL implementations
- errors.py: Storage-level error types
- session.py: Global engine and session factory management
- utils.py: Database utility functions (engine, session factory, table creation)
"""

from .base import Base
from .errors import DatabaseError, UniqueConstraintViolationError
from .session import (
    async_session_maker,
    engine,
    init_db,
)
from .utils import (
    create_all,
    create_engine,
    create_sessionmaker,
    drop_all,
)

__all__ = [
    "Base",
    "DatabaseError",
    "UniqueConstraintViolationError",
    "async_session_maker",
    "create_all",
    "create_engine",
    "create_sessionmaker",
    "drop_all",
    "engine",
    "init_db",
]
