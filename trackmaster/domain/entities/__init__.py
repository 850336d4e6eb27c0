from .user import User, Identity
from .domain import Domain
from .device import Device, Detail
from .data_event import (
    ClientContext,
    CountryOwnerCount,
    DataEvent,
    DeviceInfo,
    GeoLocation,
    Location,
)

__all__ = [
    "User",
    "Identity",
    "Domain",
    "Device",
    "Detail",
    "DataEvent",
    "Location",
    "CountryOwnerCount",
    "DeviceInfo",
    "GeoLocation",
    "ClientContext",
]
