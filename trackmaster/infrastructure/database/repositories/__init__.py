from .user_repository import SQLAlchemyUserRepository
from .domain_repository import SQLAlchemyDomainRepository
from .device_repository import SQLAlchemyDetailRepository, SQLAlchemyDeviceRepository
from .data_event_repository import SQLAlchemyDataEventRepository

__all__ = [
    "SQLAlchemyUserRepository",
    "SQLAlchemyDomainRepository",
    "SQLAlchemyDeviceRepository",
    "SQLAlchemyDetailRepository",
    "SQLAlchemyDataEventRepository",
]
