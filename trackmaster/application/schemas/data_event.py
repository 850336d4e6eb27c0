"""Pydantic DTOs (Data Transfer Objects) for the DataEvent feature."""

from datetime import datetime

from pydantic import Field

from trackmaster.application.schemas.base import CamelModel
from trackmaster.application.validation import NumericText, RequiredText


class LatLng(CamelModel):
    """Client-supplied coordinates; missing parts are filled by geolocation."""

    latitude: float | None = Field(None, allow_inf_nan=False, ge=-90, le=90)
    longitude: float | None = Field(None, allow_inf_nan=False, ge=-180, le=180)


class DataEventCreate(CamelModel):
    """Schema for recording a visitor hit."""

    owner: RequiredText = Field(..., examples=["John Doe"])
    archive: NumericText | None = None
    latlng: LatLng | None = None


class LocationResponse(CamelModel):
    longitude: float
    latitude: float


class DataEventResponse(CamelModel):
    """Schema returned to the client."""

    id: int
    ip: str
    ip_details: str
    host: str
    owner: str
    source: str
    domain: str
    brand: str | None
    country: str
    country_flag: str
    isp: str
    isp_domain: str
    is_vpn: bool
    is_new: bool
    archive: str | None
    location: LocationResponse
    created_at: datetime
    updated_at: datetime


class DataEventEnvelope(CamelModel):
    data: DataEventResponse


class CountryOwnerCountResponse(CamelModel):
    country: str
    owner: str
    count: int


class DataEventListResponse(CamelModel):
    """Page of data events plus aggregate counts over the whole table."""

    data: list[DataEventResponse]
    nbr_countries: int
    nbr_data_hits: int
    users: list[CountryOwnerCountResponse]
