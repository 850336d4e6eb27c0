"""SQLAlchemy ORM models for the Device and Detail entities."""

from sqlalchemy import Index, String
from sqlalchemy.orm import Mapped, mapped_column

from trackmaster.infrastructure.database.base import Base
from trackmaster.infrastructure.database.models._timestamps import TimestampMixin


class DeviceModel(TimestampMixin, Base):
    """ORM model — maps to the 'devices' table."""

    __tablename__ = "devices"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    ip: Mapped[str] = mapped_column(String(255), nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    user_agent: Mapped[str] = mapped_column(String(255), nullable=False)
    details: Mapped[str] = mapped_column(String(255), nullable=False)
    details_ip_info: Mapped[str] = mapped_column(String(255), nullable=False)

    __table_args__ = (
        Index("ix_devices_user_agent", "user_agent"),
    )

    def __repr__(self) -> str:
        return f"<DeviceModel(id={self.id}, name='{self.name}')>"


class DetailModel(TimestampMixin, Base):
    """ORM model — maps to the 'details' table."""

    __tablename__ = "details"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    ip: Mapped[str] = mapped_column(String(255), nullable=False)
    brand: Mapped[str] = mapped_column(String(255), nullable=False)
    host: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:
        return f"<DetailModel(id={self.id}, ip='{self.ip}')>"
