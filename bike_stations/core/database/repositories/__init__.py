"""
Database repository layer using SQLModel.

This package contains the persistence port and its SQL implementations. Each
module provides type-safe data access operations for its corresponding
SQLModel entity model.

All repositories are built on SQLModel for:
- Type-safe ORM operations with Pydantic validation
- Async-first database access patterns
- Consistent interface via AsyncBaseRepository
- Query building utilities for filtering, ordering and pagination

Modules:
- base: AsyncBaseRepository persistence port and QueryBuilder utilities
- stations: Station row repository operations
"""

from . import base, stations

__all__ = [
    "base",
    "stations",
]
