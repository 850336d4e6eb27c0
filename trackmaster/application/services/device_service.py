"""Application services (use cases) for Device and Detail operations."""

import logging

from trackmaster.application.interfaces import DetailRepository, DeviceRepository
from trackmaster.application.schemas import DetailCreate, DeviceCreate
from trackmaster.application.services.failures import persistence_failures
from trackmaster.application.services.ids import ensure_stored_id
from trackmaster.domain.entities import Detail, Device
from trackmaster.domain.exceptions import NotFoundError

logger = logging.getLogger(__name__)


class DeviceService:
    """Orchestrates device CRUD logic. Depends on the repository port (DI)."""

    def __init__(self, repository: DeviceRepository):
        self._repository = repository

    async def get_device(self, device_id: int) -> Device:
        ensure_stored_id("device", device_id)
        with persistence_failures("Something went wrong, could not find device."):
            device = await self._repository.get_by_id(device_id)
        if device is None:
            raise NotFoundError("device", device_id)
        return device

    async def list_devices(self) -> list[Device]:
        with persistence_failures("Fetching devices failed, please try again later."):
            return await self._repository.get_all()

    async def create_device(self, data: DeviceCreate) -> Device:
        device = Device(
            ip=data.ip,
            name=data.name,
            user_agent=data.user_agent,
            details=data.details,
            details_ip_info=data.details_ip_info,
        )
        with persistence_failures("Registering device failed, please try again."):
            device = await self._repository.create(device)
        logger.info("Recorded device %s (id=%s)", device.name, device.id)
        return device

    async def delete_device(self, device_id: int) -> bool:
        ensure_stored_id("device", device_id)
        with persistence_failures("Something went wrong, could not delete device."):
            exists = await self._repository.get_by_id(device_id)
            if exists is None:
                raise NotFoundError("device", device_id)
            return await self._repository.delete(device_id)


class DetailService:
    """Orchestrates detail CRUD logic. Depends on the repository port (DI)."""

    def __init__(self, repository: DetailRepository):
        self._repository = repository

    async def get_detail(self, detail_id: int) -> Detail:
        ensure_stored_id("detail", detail_id)
        with persistence_failures("Something went wrong, could not find detail."):
            detail = await self._repository.get_by_id(detail_id)
        if detail is None:
            raise NotFoundError("detail", detail_id)
        return detail

    async def list_details(self) -> list[Detail]:
        with persistence_failures("Fetching details failed, please try again later."):
            return await self._repository.get_all()

    async def create_detail(self, data: DetailCreate) -> Detail:
        detail = Detail(ip=data.ip, brand=data.brand, host=data.host)
        with persistence_failures("Registering detail failed, please try again."):
            detail = await self._repository.create(detail)
        logger.info("Recorded detail for %s (id=%s)", detail.ip, detail.id)
        return detail

    async def delete_detail(self, detail_id: int) -> bool:
        ensure_stored_id("detail", detail_id)
        with persistence_failures("Something went wrong, could not delete detail."):
            exists = await self._repository.get_by_id(detail_id)
            if exists is None:
                raise NotFoundError("detail", detail_id)
            return await self._repository.delete(detail_id)
