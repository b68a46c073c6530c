"""
Database entity models.

This package contains the database entity models, one module per table.

Modules:
- stations: Bike-share station records with their flattened value objects
"""

from . import stations

__all__ = [
    "stations",
]
