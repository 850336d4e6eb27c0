"""Pydantic DTOs (Data Transfer Objects) for the Device and Detail features."""

from datetime import datetime

from pydantic import Field

from trackmaster.application.schemas.base import CamelModel
from trackmaster.application.validation import RequiredText


class DeviceCreate(CamelModel):
    """Schema for recording a new device."""

    ip: RequiredText = Field(..., examples=["192.168.0.1"])
    name: RequiredText = Field(..., examples=["My Laptop"])
    user_agent: RequiredText
    details: RequiredText
    details_ip_info: RequiredText


class DeviceResponse(CamelModel):
    id: int
    ip: str
    name: str
    user_agent: str
    details: str
    details_ip_info: str
    created_at: datetime
    updated_at: datetime


class DeviceEnvelope(CamelModel):
    device: DeviceResponse


class DeviceListResponse(CamelModel):
    devices: list[DeviceResponse]


class DetailCreate(CamelModel):
    """Schema for recording a new detail."""

    ip: RequiredText
    brand: RequiredText
    host: RequiredText


class DetailResponse(CamelModel):
    id: int
    ip: str
    brand: str
    host: str
    created_at: datetime
    updated_at: datetime


class DetailEnvelope(CamelModel):
    detail: DetailResponse


class DetailListResponse(CamelModel):
    details: list[DetailResponse]
