"""Domain entity: an API account."""

from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass
class User:
    """An account that can sign in and manage tracked resources.

    ``password`` always holds a bcrypt hash, never the plaintext.
    """

    email: str
    password: str
    id: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def update(self, email: str | None = None, password: str | None = None) -> None:
        """Update credentials and refresh the updated_at timestamp."""
        if email is not None:
            self.email = email
        if password is not None:
            self.password = password
        self.updated_at = datetime.now(timezone.utc)


@dataclass(frozen=True)
class Identity:
    """Claims carried by a verified bearer token."""

    user_id: int
    email: str
