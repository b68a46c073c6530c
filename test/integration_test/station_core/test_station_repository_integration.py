"""Integration tests for the station repository.

Exercises the full stack (domain model → SQL repository → persistence port →
SQLite via aiosqlite) to verify round-trip fidelity, duplicate rejection
backed by unique constraints, and lookup semantics.
"""

from __future__ import annotations

from datetime import datetime, timezone
from random import randint
from uuid import UUID, uuid4

import pytest

from bike_stations.core.models.domain import StationDetailType
from bike_stations.station_core import (
    DuplicateExternalStationIdError,
    DuplicateStationIdError,
    SqlStationRepository,
    StationAlreadyExistsError,
    build_station_repository,
)
from test.support.builders import (
    build_location,
    build_station,
    build_station_detail,
    build_station_external_data,
    build_station_with_external_id,
)


@pytest.fixture
def repository(session_factory) -> SqlStationRepository:
    """Station repository over an in-memory database."""
    return build_station_repository(session_factory=session_factory)


class TestAddStation:
    """Tests for adding stations."""

    async def test_add_a_station(self, repository):
        station_id = uuid4()
        station = build_station(
            station_id=station_id,
            station_detail=build_station_detail(
                name="01 - C/ GRAN VIA CORTS CATALANES 760",
                type=StationDetailType.bike,
            ),
            station_external_data=build_station_external_data(
                external_station_id="1",
                nearby_external_station_ids=["24", "369", "387", "426"],
            ),
            location=build_location(
                address="Gran Via Corts Catalanes",
                address_number="760",
                district_code=1,
                latitude=41.397952,
                longitude=2.180042,
                zip_code="08013",
            ),
            created_at=datetime.now(timezone.utc),
            updated_at=datetime.now(timezone.utc),
        )

        await repository.add(station)

        assert await repository.find_by_station_id(station_id) == station

    async def test_add_a_station_without_location_address_number(self, repository):
        station_id = uuid4()
        station = build_station(
            station_id=station_id,
            station_external_data=build_station_external_data(external_station_id="1"),
            location=build_location(address_number=None),
        )

        await repository.add(station)

        found = await repository.find_by_station_id(station_id)
        assert found == station
        assert found.location.address_number is None

    async def test_add_keeps_nearby_ids_order_and_duplicates(self, repository):
        station = build_station(
            station_external_data=build_station_external_data(nearby_external_station_ids=["426", "24", "426"])
        )

        await repository.add(station)

        found = await repository.find_by_station_id(station.station_id)
        assert found.station_external_data.nearby_external_station_ids == ["426", "24", "426"]

    async def test_add_keeps_microsecond_timestamps(self, repository):
        created = datetime(2024, 3, 1, 8, 15, 30, 123456, tzinfo=timezone.utc)
        station = build_station(created_at=created, updated_at=created)

        await repository.add(station)

        found = await repository.find_by_station_id(station.station_id)
        assert found.created_at == created
        assert found.updated_at == created

    async def test_can_not_add_a_station_that_already_exists_with_station_id(self, repository):
        station_id = UUID("25769c6c-d34d-4bfe-ba98-e0ee856f3e7a")
        await repository.add(build_station(station_id=station_id))

        with pytest.raises(DuplicateStationIdError) as exc_info:
            await repository.add(build_station(station_id=station_id))

        assert str(exc_info.value) == 'A station already exists with station Id "25769c6c-d34d-4bfe-ba98-e0ee856f3e7a".'

    async def test_can_not_add_a_station_that_already_exists_with_external_station_id(self, repository):
        await repository.add(build_station_with_external_id("12"))

        with pytest.raises(StationAlreadyExistsError) as exc_info:
            await repository.add(build_station_with_external_id("12"))

        assert isinstance(exc_info.value, DuplicateExternalStationIdError)
        assert 'A station already exists with external station Id "12"' in str(exc_info.value)

    async def test_station_id_collision_is_reported_when_both_ids_collide(self, repository):
        station = build_station_with_external_id("12")
        await repository.add(station)

        with pytest.raises(DuplicateStationIdError):
            await repository.add(build_station_with_external_id("12", station_id=station.station_id))

    async def test_rejected_station_is_not_stored(self, repository):
        original = build_station_with_external_id("12")
        await repository.add(original)

        with pytest.raises(StationAlreadyExistsError):
            await repository.add(build_station_with_external_id("12"))

        assert await repository.find_all() == [original]


class TestFindStation:
    """Tests for looking stations up."""

    async def test_find_by_station_id_a_station_that_does_exist(self, repository):
        station_id = uuid4()
        await repository.add(build_station(station_id=station_id))

        found = await repository.find_by_station_id(station_id)

        assert found is not None
        assert found.station_id == station_id

    async def test_find_by_station_id_accepts_string(self, repository):
        station = build_station()
        await repository.add(station)

        assert await repository.find_by_station_id(str(station.station_id)) == station

    async def test_can_not_find_by_station_id_a_station_that_does_not_exist(self, repository):
        await repository.add(build_station(station_id=uuid4()))

        assert await repository.find_by_station_id(uuid4()) is None

    async def test_find_by_external_station_id_a_station_that_does_exist(self, repository):
        external_station_id = str(randint(1, 1000))
        await repository.add(build_station_with_external_id(external_station_id))

        found = await repository.find_by_external_station_id(external_station_id)

        assert found is not None
        assert found.external_station_id == external_station_id

    async def test_can_not_find_by_external_station_id_a_station_that_does_not_exist(self, repository):
        await repository.add(build_station_with_external_id("external_id"))

        assert await repository.find_by_external_station_id("invalid_external_id") is None

    async def test_find_by_external_station_id_is_case_sensitive(self, repository):
        await repository.add(build_station_with_external_id("external_id"))

        assert await repository.find_by_external_station_id("EXTERNAL_ID") is None

    async def test_find_all_stations(self, repository):
        station1 = build_station_with_external_id("1")
        station2 = build_station_with_external_id("2")
        station3 = build_station_with_external_id("3")
        for station in (station1, station2, station3):
            await repository.add(station)

        assert await repository.find_all() == [station1, station2, station3]

    async def test_find_all_follows_insertion_not_identifier_order(self, repository):
        stations = [build_station_with_external_id(external_id) for external_id in ["30", "4", "100"]]
        for station in stations:
            await repository.add(station)

        assert await repository.find_all() == stations

    async def test_find_all_on_empty_store(self, repository):
        assert await repository.find_all() == []
