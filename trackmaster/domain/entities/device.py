from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass
class Device:
    """A visitor device seen by a tracked site."""

    ip: str
    name: str
    user_agent: str
    details: str
    details_ip_info: str
    id: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


@dataclass
class Detail:
    """A short brand/host note about a visitor IP."""

    ip: str
    brand: str
    host: str
    id: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
