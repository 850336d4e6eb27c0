"""Abstract repository interface (port) for Domain persistence."""

from abc import ABC, abstractmethod

from trackmaster.domain.entities import Domain


class DomainRepository(ABC):
    """Port for domain persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_id(self, domain_id: int) -> Domain | None:
        """Retrieve a single domain by its ID."""
        ...

    @abstractmethod
    async def get_by_url(self, url: str) -> Domain | None:
        """Retrieve a single domain by its unique URL."""
        ...

    @abstractmethod
    async def get_all(self) -> list[Domain]:
        """Retrieve every domain."""
        ...

    @abstractmethod
    async def create(self, domain: Domain) -> Domain:
        """Persist a new domain and return it with the generated ID."""
        ...

    @abstractmethod
    async def delete(self, domain_id: int) -> bool:
        """Delete a domain. Returns True if deleted, False if not found."""
        ...
