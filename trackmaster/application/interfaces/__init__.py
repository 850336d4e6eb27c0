from .user_repository import UserRepository
from .domain_repository import DomainRepository
from .device_repository import DeviceRepository, DetailRepository
from .data_event_repository import DataEventRepository
from .lookup_clients import DeviceDetector, IpGeolocator
from .security import PasswordHasher, TokenIssuer

__all__ = [
    "UserRepository",
    "DomainRepository",
    "DeviceRepository",
    "DetailRepository",
    "DataEventRepository",
    "DeviceDetector",
    "IpGeolocator",
    "PasswordHasher",
    "TokenIssuer",
]
