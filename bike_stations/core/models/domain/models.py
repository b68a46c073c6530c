"""Domain models for bike-share stations."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import List, Optional
from uuid import UUID, uuid4

from pydantic import Field, field_validator

from ..base import BaseSchema
from .enums import StationDetailType


# Column widths of the stored representation.
NAME_MAX_LENGTH = 255
EXTERNAL_STATION_ID_MAX_LENGTH = 64
ADDRESS_MAX_LENGTH = 255
ADDRESS_NUMBER_MAX_LENGTH = 32
ZIP_CODE_MAX_LENGTH = 16


def _utc_now() -> datetime:
    """Get current UTC datetime."""
    return datetime.now(timezone.utc)


class StationDetail(BaseSchema):
    """Human-facing description of a station."""

    name: str = Field(max_length=NAME_MAX_LENGTH)
    type: StationDetailType = StationDetailType.bike


class StationExternalData(BaseSchema):
    """
    Identifiers assigned to a station by the upstream feed.

    ``nearby_external_station_ids`` keeps the order the feed reported and may
    contain repeated ids.
    """

    external_station_id: str = Field(min_length=1, max_length=EXTERNAL_STATION_ID_MAX_LENGTH)
    nearby_external_station_ids: List[str] = Field(default_factory=list)


class Location(BaseSchema):
    """Street address and coordinates of a station."""

    address: str = Field(max_length=ADDRESS_MAX_LENGTH)
    address_number: Optional[str] = Field(default=None, max_length=ADDRESS_NUMBER_MAX_LENGTH)
    district_code: int
    latitude: float = Field(ge=-90.0, le=90.0)
    longitude: float = Field(ge=-180.0, le=180.0)
    zip_code: str = Field(max_length=ZIP_CODE_MAX_LENGTH)


class Station(BaseSchema):
    """
    A bike-share dock.

    Identified internally by ``station_id`` and externally by
    ``station_external_data.external_station_id``; both are unique across all
    stored stations.
    """

    station_id: UUID = Field(default_factory=uuid4)
    station_detail: StationDetail
    station_external_data: StationExternalData
    location: Location
    created_at: datetime = Field(default_factory=_utc_now)
    updated_at: datetime = Field(default_factory=_utc_now)

    @field_validator("created_at", "updated_at")
    @classmethod
    def _as_utc(cls, value: datetime) -> datetime:
        # Naive values are taken to be UTC already.
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)

    @property
    def external_station_id(self) -> str:
        """Identifier the upstream feed uses for this station."""
        return self.station_external_data.external_station_id
