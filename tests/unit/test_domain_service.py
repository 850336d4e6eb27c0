"""Unit tests for the DomainService."""

import pytest

from trackmaster.application.schemas import DomainCreate
from trackmaster.application.services import DomainService
from trackmaster.domain.exceptions import ConflictError, InternalError, NotFoundError
from tests.fakes import BrokenDomainRepository, FakeDomainRepository


@pytest.fixture
def service() -> DomainService:
    return DomainService(FakeDomainRepository())


def _domain(url: str = "https://www.example.com/") -> DomainCreate:
    return DomainCreate(domain_name="example.com", url=url, owner="John Doe")


@pytest.mark.asyncio
async def test_create_domain(service: DomainService):
    domain = await service.create_domain(_domain())
    assert domain.id is not None
    assert domain.url == "https://www.example.com/"


@pytest.mark.asyncio
async def test_create_domain_with_taken_url(service: DomainService):
    await service.create_domain(_domain())
    with pytest.raises(ConflictError):
        await service.create_domain(_domain())
    assert len(await service.list_domains()) == 1


@pytest.mark.asyncio
async def test_delete_domain_twice_is_not_found(service: DomainService):
    created = await service.create_domain(_domain())
    assert await service.delete_domain(created.id) is True
    for _ in range(2):
        with pytest.raises(NotFoundError):
            await service.delete_domain(created.id)


@pytest.mark.asyncio
async def test_storage_failure_becomes_internal_error():
    service = DomainService(BrokenDomainRepository())
    with pytest.raises(InternalError) as exc_info:
        await service.list_domains()
    assert exc_info.value.message == "Fetching domains failed, please try again later."
    assert "connection lost" not in exc_info.value.message


@pytest.mark.asyncio
async def test_storage_failure_during_create_becomes_internal_error():
    service = DomainService(BrokenDomainRepository())
    with pytest.raises(InternalError):
        await service.create_domain(_domain())


class _OverflowingDomainRepository(FakeDomainRepository):
    """Fails like SQLite does when handed an id wider than 64 bits."""

    async def get_by_id(self, domain_id: int):
        raise OverflowError("Python int too large to convert to SQLite INTEGER")


@pytest.mark.asyncio
async def test_out_of_range_id_is_not_found_without_a_query():
    service = DomainService(_OverflowingDomainRepository())
    for _ in range(2):
        with pytest.raises(NotFoundError):
            await service.delete_domain(2**63)
    with pytest.raises(NotFoundError):
        await service.get_domain(2**31)
