from .base import CamelModel, MessageResponse
from .user import (
    LoginResponse,
    SignupResponse,
    UserCredentials,
    UserEnvelope,
    UserListResponse,
    UserResponse,
    UserUpdate,
)
from .domain import DomainCreate, DomainEnvelope, DomainListResponse, DomainResponse
from .device import (
    DetailCreate,
    DetailEnvelope,
    DetailListResponse,
    DetailResponse,
    DeviceCreate,
    DeviceEnvelope,
    DeviceListResponse,
    DeviceResponse,
)
from .data_event import (
    CountryOwnerCountResponse,
    DataEventCreate,
    DataEventEnvelope,
    DataEventListResponse,
    DataEventResponse,
    LatLng,
    LocationResponse,
)

__all__ = [
    "CamelModel",
    "MessageResponse",
    "UserCredentials",
    "UserUpdate",
    "UserResponse",
    "UserEnvelope",
    "UserListResponse",
    "SignupResponse",
    "LoginResponse",
    "DomainCreate",
    "DomainResponse",
    "DomainEnvelope",
    "DomainListResponse",
    "DeviceCreate",
    "DeviceResponse",
    "DeviceEnvelope",
    "DeviceListResponse",
    "DetailCreate",
    "DetailResponse",
    "DetailEnvelope",
    "DetailListResponse",
    "LatLng",
    "DataEventCreate",
    "LocationResponse",
    "DataEventResponse",
    "DataEventEnvelope",
    "CountryOwnerCountResponse",
    "DataEventListResponse",
]
