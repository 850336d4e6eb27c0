"""SQLAlchemy ORM model for the Domain entity."""

from sqlalchemy import Index, String
from sqlalchemy.orm import Mapped, mapped_column

from trackmaster.infrastructure.database.base import Base
from trackmaster.infrastructure.database.models._timestamps import TimestampMixin


class DomainModel(TimestampMixin, Base):
    """ORM model — maps to the 'domains' table."""

    __tablename__ = "domains"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    domain_name: Mapped[str] = mapped_column(String(255), nullable=False)
    url: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    owner: Mapped[str] = mapped_column(String(255), nullable=False)

    __table_args__ = (
        Index("ix_domains_owner", "owner"),
    )

    def __repr__(self) -> str:
        return f"<DomainModel(id={self.id}, url='{self.url}')>"
