"""Domain models and enums for bike-share stations.

A ``Station`` is the aggregate root. It exclusively owns one
``StationDetail``, one ``StationExternalData`` and one ``Location``; none of
these value objects has a lifecycle of its own.

The models are immutable and compare structurally, so a station read back
from storage is equal to the one that was written.
"""

from .enums import StationDetailType
from .models import (
    Location,
    Station,
    StationDetail,
    StationExternalData,
)

__all__ = [
    "Location",
    "Station",
    "StationDetail",
    "StationDetailType",
    "StationExternalData",
]
