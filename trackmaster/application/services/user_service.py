"""Application service (use case) for accounts: signup, login, credential updates."""

import logging

from trackmaster.application.interfaces import PasswordHasher, TokenIssuer, UserRepository
from trackmaster.application.services.failures import persistence_failures
from trackmaster.application.services.ids import ensure_stored_id
from trackmaster.domain.entities import Identity, User
from trackmaster.domain.exceptions import AuthError, ConflictError, NotFoundError

logger = logging.getLogger(__name__)

_INVALID_CREDENTIALS = "Invalid credentials, could not log you in."


class UserService:
    """Orchestrates account logic. Depends on the repository, hasher and token ports (DI)."""

    def __init__(
        self,
        repository: UserRepository,
        hasher: PasswordHasher,
        token_issuer: TokenIssuer,
    ):
        self._repository = repository
        self._hasher = hasher
        self._token_issuer = token_issuer

    async def signup(self, email: str, password: str) -> User:
        """Create an account; the email must not be registered yet."""
        with persistence_failures("Registering user failed, please try again later."):
            existing = await self._repository.get_by_email(email)
        if existing is not None:
            raise ConflictError(
                "User", "email", "User exists already, register another user instead."
            )

        hashed = await self._hasher.hash(password)
        with persistence_failures("Registering user failed, please try again."):
            user = await self._repository.create(User(email=email, password=hashed))
        logger.info("Registered user %s (id=%s)", user.email, user.id)
        return user

    async def login(self, email: str, password: str) -> tuple[User, str]:
        """Verify credentials and return the user with a freshly signed token."""
        with persistence_failures("Logging in failed, please try again later."):
            user = await self._repository.get_by_email(email)
        if user is None or not await self._hasher.verify(password, user.password):
            logger.info("Rejected login for %s", email)
            raise AuthError(_INVALID_CREDENTIALS, status_code=403)
        return user, self._token_issuer.issue(user.id, user.email)

    async def list_users(self) -> list[User]:
        with persistence_failures("Fetching users failed, please try again later."):
            return await self._repository.get_all()

    async def get_user(self, user_id: int) -> User:
        ensure_stored_id("user", user_id)
        with persistence_failures("Something went wrong, could not find user."):
            user = await self._repository.get_by_id(user_id)
        if user is None:
            raise NotFoundError("user", user_id)
        return user

    async def update_credentials(
        self,
        user_id: int,
        *,
        email: str,
        password: str,
        current_password: str,
        identity: Identity,
    ) -> User:
        """Replace email and password after re-verifying the current password.

        Only the account owner may update it.
        """
        if identity.user_id != user_id:
            raise AuthError("You are not allowed to update this user.", status_code=403)

        user = await self.get_user(user_id)
        if not await self._hasher.verify(current_password, user.password):
            raise AuthError("Invalid credentials.", status_code=403)

        if email != user.email:
            with persistence_failures("Something went wrong, could not update user!"):
                taken = await self._repository.get_by_email(email)
            if taken is not None:
                raise ConflictError(
                    "User", "email", "Email is already in use by another user."
                )

        user.update(email=email, password=await self._hasher.hash(password))
        with persistence_failures("Something went wrong, could not update user!"):
            updated = await self._repository.update(user)
        logger.info("Updated credentials of user id=%s", user_id)
        return updated
