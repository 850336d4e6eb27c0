"""Abstract repository interface (port) for DataEvent persistence."""

from abc import ABC, abstractmethod

from trackmaster.domain.entities import CountryOwnerCount, DataEvent


class DataEventRepository(ABC):
    """Port for data event persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_id(self, event_id: int) -> DataEvent | None:
        """Retrieve a single data event by its ID."""
        ...

    @abstractmethod
    async def get_all(self, skip: int = 0, limit: int | None = None) -> list[DataEvent]:
        """Retrieve data events in insertion order; ``limit=None`` means no limit."""
        ...

    @abstractmethod
    async def count_countries(self) -> int:
        """Return the number of distinct countries across all data events."""
        ...

    @abstractmethod
    async def count_by_country_owner(self) -> list[CountryOwnerCount]:
        """Return event counts grouped by (country, owner)."""
        ...

    @abstractmethod
    async def create(self, event: DataEvent) -> DataEvent:
        """Persist a new data event and return it with the generated ID."""
        ...

    @abstractmethod
    async def delete(self, event_id: int) -> bool:
        """Delete a data event. Returns True if deleted, False if not found."""
        ...
