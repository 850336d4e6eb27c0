"""SQLAlchemy ORM model for the DataEvent entity."""

from sqlalchemy import Boolean, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from trackmaster.infrastructure.database.base import Base
from trackmaster.infrastructure.database.models._timestamps import TimestampMixin


class DataEventModel(TimestampMixin, Base):
    """ORM model — maps to the 'data_events' table.

    ``location`` holds the JSON-serialized ``{longitude, latitude}`` pair.
    """

    __tablename__ = "data_events"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    ip: Mapped[str] = mapped_column(String(255), nullable=False)
    ip_details: Mapped[str] = mapped_column(String(255), nullable=False)
    host: Mapped[str] = mapped_column(String(255), nullable=False)
    owner: Mapped[str] = mapped_column(String(255), nullable=False)
    source: Mapped[str] = mapped_column(String(255), nullable=False)
    domain: Mapped[str] = mapped_column(String(255), nullable=False)
    brand: Mapped[str | None] = mapped_column(String(255), nullable=True)
    country: Mapped[str] = mapped_column(String(255), nullable=False)
    country_flag: Mapped[str] = mapped_column(String(32), nullable=False)
    isp: Mapped[str] = mapped_column(String(255), nullable=False)
    isp_domain: Mapped[str] = mapped_column(String(255), nullable=False)
    is_vpn: Mapped[bool] = mapped_column(Boolean, nullable=False)
    is_new: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    archive: Mapped[str | None] = mapped_column(String(255), nullable=True)
    location: Mapped[str] = mapped_column(Text, nullable=False)

    __table_args__ = (
        Index("ix_data_events_ip", "ip"),
        Index("ix_data_events_country", "country"),
        Index("ix_data_events_owner", "owner"),
        Index("ix_data_events_domain", "domain"),
    )

    def __repr__(self) -> str:
        return f"<DataEventModel(id={self.id}, ip='{self.ip}', country='{self.country}')>"
