from .base import Base
from .session import engine, async_session_factory, get_db_session
from .models import DataEventModel, DetailModel, DeviceModel, DomainModel, UserModel

__all__ = [
    "Base",
    "engine",
    "async_session_factory",
    "get_db_session",
    "UserModel",
    "DomainModel",
    "DeviceModel",
    "DetailModel",
    "DataEventModel",
]
