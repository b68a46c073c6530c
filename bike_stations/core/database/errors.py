"""Error types for the database layer.

Storage-level failures that repositories translate into domain errors.
"""

from __future__ import annotations


class DatabaseError(Exception):
    """Base error for all database layer exceptions."""


class UniqueConstraintViolationError(DatabaseError):
    """Raised when an insert is rejected by a unique constraint of ``table``."""

    def __init__(self, table: str) -> None:
        super().__init__(f"Unique constraint violated on table '{table}'")
        self.table = table
