from .user_service import UserService
from .domain_service import DomainService
from .device_service import DetailService, DeviceService
from .data_event_service import DataEventPage, DataEventService

__all__ = [
    "UserService",
    "DomainService",
    "DeviceService",
    "DetailService",
    "DataEventService",
    "DataEventPage",
]
