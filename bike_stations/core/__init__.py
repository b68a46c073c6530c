"""
Core utilities and configuration for bike-stations.

This package provides core functionality including settings, logging
configuration, domain models and the database layer.
"""

from bike_stations.core.logging_config import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
