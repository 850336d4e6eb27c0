"""Abstract repository interfaces (ports) for Device and Detail persistence."""

from abc import ABC, abstractmethod

from trackmaster.domain.entities import Detail, Device


class DeviceRepository(ABC):
    """Port for device persistence: implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_id(self, device_id: int) -> Device | None:
        ...

    @abstractmethod
    async def get_all(self) -> list[Device]:
        ...

    @abstractmethod
    async def create(self, device: Device) -> Device:
        ...

    @abstractmethod
    async def delete(self, device_id: int) -> bool:
        """Delete a device. Returns True if deleted, False if not found."""
        ...


class DetailRepository(ABC):
    """Port for detail persistence: implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_id(self, detail_id: int) -> Detail | None:
        ...

    @abstractmethod
    async def get_all(self) -> list[Detail]:
        ...

    @abstractmethod
    async def create(self, detail: Detail) -> Detail:
        ...

    @abstractmethod
    async def delete(self, detail_id: int) -> bool:
        """Delete a detail. Returns True if deleted, False if not found."""
        ...
