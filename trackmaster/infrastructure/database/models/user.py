"""SQLAlchemy ORM model for the User entity."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from trackmaster.infrastructure.database.base import Base
from trackmaster.infrastructure.database.models._timestamps import TimestampMixin


class UserModel(TimestampMixin, Base):
    """ORM model — maps to the 'users' table."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    password: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:
        return f"<UserModel(id={self.id}, email='{self.email}')>"
