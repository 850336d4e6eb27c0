"""Concrete repository implementation for User backed by SQLAlchemy."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from trackmaster.application.interfaces import UserRepository
from trackmaster.domain.entities import User
from trackmaster.infrastructure.database.models import UserModel
from trackmaster.infrastructure.database.repositories._errors import as_utc, database_errors


class SQLAlchemyUserRepository(UserRepository):
    """Implements the UserRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: UserModel) -> User:
        """Map ORM model → domain entity."""
        return User(
            id=model.id,
            email=model.email,
            password=model.password,
            created_at=as_utc(model.created_at),
            updated_at=as_utc(model.updated_at),
        )

    async def get_by_id(self, user_id: int) -> User | None:
        with database_errors("get user"):
            result = await self._session.get(UserModel, user_id)
        return self._to_entity(result) if result else None

    async def get_by_email(self, email: str) -> User | None:
        with database_errors("get user by email"):
            result = await self._session.execute(
                select(UserModel).where(UserModel.email == email)
            )
            model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def get_all(self) -> list[User]:
        with database_errors("list users"):
            result = await self._session.execute(select(UserModel).order_by(UserModel.id))
            return [self._to_entity(row) for row in result.scalars().all()]

    async def create(self, user: User) -> User:
        model = UserModel(email=user.email, password=user.password)
        with database_errors("create user"):
            self._session.add(model)
            await self._session.flush()
        return self._to_entity(model)

    async def update(self, user: User) -> User:
        with database_errors("update user"):
            model = await self._session.get(UserModel, user.id)
            if model is None:
                raise ValueError(f"User {user.id} not found in database")
            model.email = user.email
            model.password = user.password
            model.updated_at = user.updated_at
            await self._session.flush()
        return self._to_entity(model)
