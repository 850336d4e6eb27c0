"""Abstract repository interface (port) for User persistence."""

from abc import ABC, abstractmethod

from trackmaster.domain.entities import User


class UserRepository(ABC):
    """Port for user persistence: implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_id(self, user_id: int) -> User | None:
        """Retrieve a single user by its ID."""
        ...

    @abstractmethod
    async def get_by_email(self, email: str) -> User | None:
        """Retrieve a single user by its (normalized) email."""
        ...

    @abstractmethod
    async def get_all(self) -> list[User]:
        """Retrieve every user."""
        ...

    @abstractmethod
    async def create(self, user: User) -> User:
        """Persist a new user and return it with the generated ID."""
        ...

    @abstractmethod
    async def update(self, user: User) -> User:
        """Update an existing user's credentials."""
        ...
