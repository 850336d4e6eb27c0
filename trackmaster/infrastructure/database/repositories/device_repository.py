"""Concrete repository implementations for Device and Detail backed by SQLAlchemy."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from trackmaster.application.interfaces import DetailRepository, DeviceRepository
from trackmaster.domain.entities import Detail, Device
from trackmaster.infrastructure.database.models import DetailModel, DeviceModel
from trackmaster.infrastructure.database.repositories._errors import as_utc, database_errors


class SQLAlchemyDeviceRepository(DeviceRepository):
    """Implements the DeviceRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: DeviceModel) -> Device:
        return Device(
            id=model.id,
            ip=model.ip,
            name=model.name,
            user_agent=model.user_agent,
            details=model.details,
            details_ip_info=model.details_ip_info,
            created_at=as_utc(model.created_at),
            updated_at=as_utc(model.updated_at),
        )

    async def get_by_id(self, device_id: int) -> Device | None:
        with database_errors("get device"):
            result = await self._session.get(DeviceModel, device_id)
        return self._to_entity(result) if result else None

    async def get_all(self) -> list[Device]:
        with database_errors("list devices"):
            result = await self._session.execute(select(DeviceModel).order_by(DeviceModel.id))
            return [self._to_entity(row) for row in result.scalars().all()]

    async def create(self, device: Device) -> Device:
        model = DeviceModel(
            ip=device.ip,
            name=device.name,
            user_agent=device.user_agent,
            details=device.details,
            details_ip_info=device.details_ip_info,
        )
        with database_errors("create device"):
            self._session.add(model)
            await self._session.flush()
        return self._to_entity(model)

    async def delete(self, device_id: int) -> bool:
        with database_errors("delete device"):
            model = await self._session.get(DeviceModel, device_id)
            if model is None:
                return False
            await self._session.delete(model)
            await self._session.flush()
        return True


class SQLAlchemyDetailRepository(DetailRepository):
    """Implements the DetailRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: DetailModel) -> Detail:
        return Detail(
            id=model.id,
            ip=model.ip,
            brand=model.brand,
            host=model.host,
            created_at=as_utc(model.created_at),
            updated_at=as_utc(model.updated_at),
        )

    async def get_by_id(self, detail_id: int) -> Detail | None:
        with database_errors("get detail"):
            result = await self._session.get(DetailModel, detail_id)
        return self._to_entity(result) if result else None

    async def get_all(self) -> list[Detail]:
        with database_errors("list details"):
            result = await self._session.execute(select(DetailModel).order_by(DetailModel.id))
            return [self._to_entity(row) for row in result.scalars().all()]

    async def create(self, detail: Detail) -> Detail:
        model = DetailModel(ip=detail.ip, brand=detail.brand, host=detail.host)
        with database_errors("create detail"):
            self._session.add(model)
            await self._session.flush()
        return self._to_entity(model)

    async def delete(self, detail_id: int) -> bool:
        with database_errors("delete detail"):
            model = await self._session.get(DetailModel, detail_id)
            if model is None:
                return False
            await self._session.delete(model)
            await self._session.flush()
        return True
