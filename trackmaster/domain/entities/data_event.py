"""Domain entities for enriched visitor hits and the lookups that feed them."""

import json
from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass(frozen=True)
class Location:
    """A latitude/longitude pair, persisted as a JSON string."""

    latitude: float
    longitude: float

    def serialize(self) -> str:
        return json.dumps({"longitude": self.longitude, "latitude": self.latitude})

    @classmethod
    def deserialize(cls, raw: str) -> "Location":
        data = json.loads(raw)
        return cls(latitude=data["latitude"], longitude=data["longitude"])


@dataclass
class DataEvent:
    """A single visitor hit enriched with device and geolocation metadata."""

    ip: str
    ip_details: str
    host: str
    owner: str
    source: str
    domain: str
    country: str
    country_flag: str
    isp: str
    isp_domain: str
    is_vpn: bool
    location: Location
    brand: str | None = None
    archive: str | None = None
    is_new: bool = True
    id: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


@dataclass(frozen=True)
class CountryOwnerCount:
    """Number of data events recorded for one (country, owner) pair."""

    country: str
    owner: str
    count: int


@dataclass(frozen=True)
class DeviceInfo:
    """Result of a user-agent lookup."""

    type: str
    brand: str | None = None


@dataclass(frozen=True)
class GeoLocation:
    """Result of an IP geolocation lookup."""

    country: str
    flag_emoji: str
    isp_name: str
    isp_domain: str
    is_vpn: bool
    latitude: float
    longitude: float


@dataclass(frozen=True)
class ClientContext:
    """What the server knows about the caller of a data event request."""

    ip: str
    user_agent: str
    host: str
