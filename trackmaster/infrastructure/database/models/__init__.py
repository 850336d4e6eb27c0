from .user import UserModel
from .domain import DomainModel
from .device import DetailModel, DeviceModel
from .data_event import DataEventModel

__all__ = [
    "UserModel",
    "DomainModel",
    "DeviceModel",
    "DetailModel",
    "DataEventModel",
]
