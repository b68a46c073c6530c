"""
Station entity models.

This module contains the database entity for bike-share stations. The
station's value objects (detail, external data and location) have no
lifecycle of their own, so they are flattened into columns of the same row
and written in the same insert as the station.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import List, Optional
from uuid import UUID

from sqlalchemy import JSON, Column, DateTime, UniqueConstraint
from sqlmodel import Field

from bike_stations.core.models.domain import (
    Location,
    Station,
    StationDetail,
    StationDetailType,
    StationExternalData,
)
from bike_stations.core.models.domain.models import (
    ADDRESS_MAX_LENGTH,
    ADDRESS_NUMBER_MAX_LENGTH,
    EXTERNAL_STATION_ID_MAX_LENGTH,
    NAME_MAX_LENGTH,
    ZIP_CODE_MAX_LENGTH,
)

from ..base import Base


class StationRowBase(Base):
    """Base fields for a stored station."""

    station_id: str = Field(max_length=36, description="Internal station identifier (UUID text)")

    # Station detail
    name: str = Field(max_length=NAME_MAX_LENGTH, description="Station display name")
    station_type: str = Field(max_length=32, description="StationDetailType value")

    # External data
    external_station_id: str = Field(
        max_length=EXTERNAL_STATION_ID_MAX_LENGTH,
        description="Identifier assigned by the upstream feed",
    )

    # Location
    address: str = Field(max_length=ADDRESS_MAX_LENGTH, description="Street name")
    address_number: Optional[str] = Field(
        default=None,
        max_length=ADDRESS_NUMBER_MAX_LENGTH,
        description="Street number, if any",
    )
    district_code: int = Field(description="City district code")
    latitude: float = Field(description="Latitude in decimal degrees")
    longitude: float = Field(description="Longitude in decimal degrees")
    zip_code: str = Field(max_length=ZIP_CODE_MAX_LENGTH, description="Postal code")


class StationRow(StationRowBase, table=True):
    """Persistent station record.

    ``id`` is a monotonically increasing surrogate key; listing stations in
    ``id`` order returns them in insertion order.

    Table: stations
    """

    __tablename__ = "stations"
    __table_args__ = (
        UniqueConstraint("station_id", name="uq_stations_station_id"),
        UniqueConstraint("external_station_id", name="uq_stations_external_station_id"),
        {"extend_existing": True},
    )

    id: Optional[int] = Field(default=None, primary_key=True)

    nearby_external_station_ids: List[str] = Field(
        default_factory=list,
        sa_column=Column(JSON, nullable=False),
    )

    created_at: datetime = Field(sa_column=Column(DateTime(timezone=True), nullable=False))
    updated_at: datetime = Field(sa_column=Column(DateTime(timezone=True), nullable=False))

    @classmethod
    def from_domain(cls, station: Station) -> StationRow:
        """Build a row from a ``Station`` aggregate."""
        detail = station.station_detail
        external = station.station_external_data
        location = station.location
        return cls(
            station_id=str(station.station_id),
            name=detail.name,
            station_type=detail.type.value,
            external_station_id=external.external_station_id,
            nearby_external_station_ids=list(external.nearby_external_station_ids),
            address=location.address,
            address_number=location.address_number,
            district_code=location.district_code,
            latitude=location.latitude,
            longitude=location.longitude,
            zip_code=location.zip_code,
            created_at=station.created_at.astimezone(timezone.utc),
            updated_at=station.updated_at.astimezone(timezone.utc),
        )

    def to_domain(self) -> Station:
        """Rebuild the ``Station`` aggregate stored in this row."""
        return Station(
            station_id=UUID(self.station_id),
            station_detail=StationDetail(
                name=self.name,
                type=StationDetailType(self.station_type),
            ),
            station_external_data=StationExternalData(
                external_station_id=self.external_station_id,
                nearby_external_station_ids=list(self.nearby_external_station_ids or []),
            ),
            location=Location(
                address=self.address,
                address_number=self.address_number,
                district_code=self.district_code,
                latitude=self.latitude,
                longitude=self.longitude,
                zip_code=self.zip_code,
            ),
            created_at=self.created_at,
            updated_at=self.updated_at,
        )

    def __repr__(self) -> str:
        return f"StationRow(station_id={self.station_id}, external_station_id={self.external_station_id})"
