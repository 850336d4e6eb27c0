"""Abstract interfaces (ports) for credential hashing and token handling."""

from abc import ABC, abstractmethod

from trackmaster.domain.entities import Identity


class PasswordHasher(ABC):
    """Port for one-way salted password hashing."""

    @abstractmethod
    async def hash(self, password: str) -> str:
        ...

    @abstractmethod
    async def verify(self, password: str, hashed: str) -> bool:
        """Return True when ``password`` matches ``hashed``; never raises on mismatch."""
        ...


class TokenIssuer(ABC):
    """Port for issuing and verifying signed bearer tokens."""

    @abstractmethod
    def issue(self, user_id: int, email: str) -> str:
        ...

    @abstractmethod
    def decode(self, token: str) -> Identity:
        """Verify signature and expiry.

        Raises:
            AuthError: if the token is malformed, forged or expired.
        """
        ...
