from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass
class Domain:
    """A website registered for tracking."""

    domain_name: str
    url: str
    owner: str
    id: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
