"""Test configuration for station e2e tests.

Provides a PostgreSQL container via testcontainers. The tests are skipped
unless ``DATABASE__ENABLE_POSTGRES_TESTS=true`` is set, since they need
Docker.
"""

from __future__ import annotations

from typing import AsyncGenerator, Generator

import pytest
from sqlalchemy.ext.asyncio import AsyncEngine
from testcontainers.postgres import PostgresContainer

from bike_stations.core.database import create_all, create_engine, drop_all
from test.settings import test_settings


@pytest.fixture(scope="session")
def postgres_container() -> Generator[PostgresContainer, None, None]:
    """Start a PostgreSQL container for the test session."""
    if not test_settings.database.enable_postgres_tests:
        pytest.skip("PostgreSQL tests disabled; set DATABASE__ENABLE_POSTGRES_TESTS=true")

    postgres_config = test_settings.database.postgres
    container = PostgresContainer(
        test_settings.database.postgres_image,
        username=postgres_config.user,
        password=postgres_config.password,
        dbname=postgres_config.db,
    )
    container.start()
    try:
        yield container
    finally:
        container.stop()


@pytest.fixture
async def postgres_engine(postgres_container: PostgresContainer) -> AsyncGenerator[AsyncEngine, None]:
    """Create a database engine connected to the test PostgreSQL container."""
    engine = create_engine(postgres_container.get_connection_url())
    await create_all(engine)
    try:
        yield engine
    finally:
        await drop_all(engine)
        await engine.dispose()
