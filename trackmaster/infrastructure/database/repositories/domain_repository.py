"""Concrete repository implementation for Domain backed by SQLAlchemy."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from trackmaster.application.interfaces import DomainRepository
from trackmaster.domain.entities import Domain
from trackmaster.infrastructure.database.models import DomainModel
from trackmaster.infrastructure.database.repositories._errors import as_utc, database_errors


class SQLAlchemyDomainRepository(DomainRepository):
    """Implements the DomainRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: DomainModel) -> Domain:
        """Map ORM model → domain entity."""
        return Domain(
            id=model.id,
            domain_name=model.domain_name,
            url=model.url,
            owner=model.owner,
            created_at=as_utc(model.created_at),
            updated_at=as_utc(model.updated_at),
        )

    def _to_model(self, entity: Domain) -> DomainModel:
        """Map domain entity → ORM model (for creation)."""
        return DomainModel(
            domain_name=entity.domain_name,
            url=entity.url,
            owner=entity.owner,
        )

    async def get_by_id(self, domain_id: int) -> Domain | None:
        with database_errors("get domain"):
            result = await self._session.get(DomainModel, domain_id)
        return self._to_entity(result) if result else None

    async def get_by_url(self, url: str) -> Domain | None:
        with database_errors("get domain by url"):
            result = await self._session.execute(
                select(DomainModel).where(DomainModel.url == url)
            )
            model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def get_all(self) -> list[Domain]:
        with database_errors("list domains"):
            result = await self._session.execute(select(DomainModel).order_by(DomainModel.id))
            return [self._to_entity(row) for row in result.scalars().all()]

    async def create(self, domain: Domain) -> Domain:
        model = self._to_model(domain)
        with database_errors("create domain"):
            self._session.add(model)
            await self._session.flush()
        return self._to_entity(model)

    async def delete(self, domain_id: int) -> bool:
        with database_errors("delete domain"):
            model = await self._session.get(DomainModel, domain_id)
            if model is None:
                return False
            await self._session.delete(model)
            await self._session.flush()
        return True
