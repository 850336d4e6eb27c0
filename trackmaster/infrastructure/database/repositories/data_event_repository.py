"""Concrete repository implementation for DataEvent backed by SQLAlchemy."""

from sqlalchemy import distinct, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from trackmaster.application.interfaces import DataEventRepository
from trackmaster.domain.entities import CountryOwnerCount, DataEvent, Location
from trackmaster.infrastructure.database.models import DataEventModel
from trackmaster.infrastructure.database.repositories._errors import as_utc, database_errors


class SQLAlchemyDataEventRepository(DataEventRepository):
    """Implements the DataEventRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: DataEventModel) -> DataEvent:
        """Map ORM model → domain entity."""
        return DataEvent(
            id=model.id,
            ip=model.ip,
            ip_details=model.ip_details,
            host=model.host,
            owner=model.owner,
            source=model.source,
            domain=model.domain,
            brand=model.brand,
            country=model.country,
            country_flag=model.country_flag,
            isp=model.isp,
            isp_domain=model.isp_domain,
            is_vpn=model.is_vpn,
            is_new=model.is_new,
            archive=model.archive,
            location=Location.deserialize(model.location),
            created_at=as_utc(model.created_at),
            updated_at=as_utc(model.updated_at),
        )

    def _to_model(self, entity: DataEvent) -> DataEventModel:
        """Map domain entity → ORM model (for creation)."""
        return DataEventModel(
            ip=entity.ip,
            ip_details=entity.ip_details,
            host=entity.host,
            owner=entity.owner,
            source=entity.source,
            domain=entity.domain,
            brand=entity.brand,
            country=entity.country,
            country_flag=entity.country_flag,
            isp=entity.isp,
            isp_domain=entity.isp_domain,
            is_vpn=entity.is_vpn,
            is_new=entity.is_new,
            archive=entity.archive,
            location=entity.location.serialize(),
        )

    async def get_by_id(self, event_id: int) -> DataEvent | None:
        with database_errors("get data event"):
            result = await self._session.get(DataEventModel, event_id)
        return self._to_entity(result) if result else None

    async def get_all(self, skip: int = 0, limit: int | None = None) -> list[DataEvent]:
        stmt = select(DataEventModel).order_by(DataEventModel.id).offset(skip)
        if limit is not None:
            stmt = stmt.limit(limit)
        with database_errors("list data events"):
            result = await self._session.execute(stmt)
            return [self._to_entity(row) for row in result.scalars().all()]

    async def count_countries(self) -> int:
        stmt = select(func.count(distinct(DataEventModel.country)))
        with database_errors("count countries"):
            result = await self._session.execute(stmt)
            return result.scalar_one()

    async def count_by_country_owner(self) -> list[CountryOwnerCount]:
        stmt = (
            select(
                DataEventModel.country,
                DataEventModel.owner,
                func.count(DataEventModel.id),
            )
            .group_by(DataEventModel.country, DataEventModel.owner)
            .order_by(DataEventModel.country, DataEventModel.owner)
        )
        with database_errors("count data events by country and owner"):
            result = await self._session.execute(stmt)
            return [
                CountryOwnerCount(country=country, owner=owner, count=count)
                for country, owner, count in result.all()
            ]

    async def create(self, event: DataEvent) -> DataEvent:
        model = self._to_model(event)
        with database_errors("create data event"):
            self._session.add(model)
            await self._session.flush()
        return self._to_entity(model)

    async def delete(self, event_id: int) -> bool:
        with database_errors("delete data event"):
            model = await self._session.get(DataEventModel, event_id)
            if model is None:
                return False
            await self._session.delete(model)
            await self._session.flush()
        return True
