"""Application service (use case) for Domain operations."""

import logging

from trackmaster.application.interfaces import DomainRepository
from trackmaster.application.schemas import DomainCreate
from trackmaster.application.services.failures import persistence_failures
from trackmaster.application.services.ids import ensure_stored_id
from trackmaster.domain.entities import Domain
from trackmaster.domain.exceptions import ConflictError, NotFoundError

logger = logging.getLogger(__name__)


class DomainService:
    """Orchestrates domain business logic. Depends on the repository port (DI)."""

    def __init__(self, repository: DomainRepository):
        self._repository = repository

    async def get_domain(self, domain_id: int) -> Domain:
        ensure_stored_id("domain", domain_id)
        with persistence_failures("Something went wrong, could not find domain."):
            domain = await self._repository.get_by_id(domain_id)
        if domain is None:
            raise NotFoundError("domain", domain_id)
        return domain

    async def list_domains(self) -> list[Domain]:
        with persistence_failures("Fetching domains failed, please try again later."):
            return await self._repository.get_all()

    async def create_domain(self, data: DomainCreate) -> Domain:
        with persistence_failures("Registering domain failed, please try again."):
            existing = await self._repository.get_by_url(data.url)
            if existing is not None:
                raise ConflictError(
                    "Domain", "url", "Domain exists already, register another domain instead."
                )
            domain = await self._repository.create(
                Domain(domain_name=data.domain_name, url=data.url, owner=data.owner)
            )
        logger.info("Registered domain %s (id=%s)", domain.url, domain.id)
        return domain

    async def delete_domain(self, domain_id: int) -> bool:
        ensure_stored_id("domain", domain_id)
        with persistence_failures("Something went wrong, could not delete domain."):
            exists = await self._repository.get_by_id(domain_id)
            if exists is None:
                raise NotFoundError("domain", domain_id)
            return await self._repository.delete(domain_id)
