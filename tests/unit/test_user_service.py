"""Unit tests for the UserService."""

import pytest

from trackmaster.application.services import UserService
from trackmaster.domain.entities import Identity
from trackmaster.domain.exceptions import AuthError, ConflictError, NotFoundError
from trackmaster.infrastructure.security.tokens import JoseTokenIssuer
from tests.fakes import FakeUserRepository, PlainPasswordHasher


@pytest.fixture
def repository() -> FakeUserRepository:
    return FakeUserRepository()


@pytest.fixture
def tokens() -> JoseTokenIssuer:
    return JoseTokenIssuer(secret="unit-test-secret")


@pytest.fixture
def service(repository, tokens) -> UserService:
    return UserService(repository, PlainPasswordHasher(), tokens)


@pytest.mark.asyncio
async def test_signup_stores_hashed_password(service: UserService, repository):
    user = await service.signup("a@b.com", "abcdefgh")
    assert user.id is not None
    stored = await repository.get_by_id(user.id)
    assert stored.password != "abcdefgh"
    assert stored.password == "hashed::abcdefgh"


@pytest.mark.asyncio
async def test_signup_rejects_taken_email(service: UserService, repository):
    await service.signup("a@b.com", "abcdefgh")
    with pytest.raises(ConflictError) as exc_info:
        await service.signup("a@b.com", "different1")
    assert exc_info.value.status_code == 422
    assert len(await repository.get_all()) == 1


@pytest.mark.asyncio
async def test_login_returns_verifiable_token(service: UserService, tokens):
    created = await service.signup("a@b.com", "abcdefgh")
    user, token = await service.login("a@b.com", "abcdefgh")
    assert user.id == created.id
    identity = tokens.decode(token)
    assert identity == Identity(user_id=created.id, email="a@b.com")


@pytest.mark.asyncio
async def test_login_with_wrong_password_is_forbidden(service: UserService):
    await service.signup("a@b.com", "abcdefgh")
    with pytest.raises(AuthError) as exc_info:
        await service.login("a@b.com", "wrong-password")
    assert exc_info.value.status_code == 403


@pytest.mark.asyncio
async def test_login_with_unknown_email_is_forbidden(service: UserService):
    with pytest.raises(AuthError) as exc_info:
        await service.login("nobody@b.com", "abcdefgh")
    assert exc_info.value.status_code == 403


@pytest.mark.asyncio
async def test_update_credentials_requires_current_password(service: UserService):
    user = await service.signup("a@b.com", "abcdefgh")
    identity = Identity(user_id=user.id, email=user.email)
    with pytest.raises(AuthError):
        await service.update_credentials(
            user.id,
            email="new@b.com",
            password="newpassword",
            current_password="not-it",
            identity=identity,
        )


@pytest.mark.asyncio
async def test_update_credentials_replaces_email_and_password(service: UserService):
    user = await service.signup("a@b.com", "abcdefgh")
    identity = Identity(user_id=user.id, email=user.email)
    updated = await service.update_credentials(
        user.id,
        email="new@b.com",
        password="newpassword",
        current_password="abcdefgh",
        identity=identity,
    )
    assert updated.email == "new@b.com"
    _, token = await service.login("new@b.com", "newpassword")
    assert token


@pytest.mark.asyncio
async def test_update_credentials_of_another_user_is_forbidden(service: UserService):
    user = await service.signup("a@b.com", "abcdefgh")
    intruder = Identity(user_id=user.id + 1, email="x@b.com")
    with pytest.raises(AuthError) as exc_info:
        await service.update_credentials(
            user.id,
            email="a@b.com",
            password="abcdefgh",
            current_password="abcdefgh",
            identity=intruder,
        )
    assert exc_info.value.status_code == 403


@pytest.mark.asyncio
async def test_update_credentials_rejects_email_of_other_user(service: UserService):
    await service.signup("taken@b.com", "abcdefgh")
    user = await service.signup("a@b.com", "abcdefgh")
    with pytest.raises(ConflictError):
        await service.update_credentials(
            user.id,
            email="taken@b.com",
            password="abcdefgh",
            current_password="abcdefgh",
            identity=Identity(user_id=user.id, email=user.email),
        )


@pytest.mark.asyncio
async def test_get_user_not_found(service: UserService):
    with pytest.raises(NotFoundError):
        await service.get_user(42)


@pytest.mark.asyncio
async def test_get_user_with_out_of_range_id(service: UserService):
    with pytest.raises(NotFoundError):
        await service.get_user(2**40)
