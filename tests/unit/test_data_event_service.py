"""Unit tests for DataEventService enrichment and pagination."""

import httpx
import pytest

from trackmaster.application.schemas import DataEventCreate
from trackmaster.application.services import DataEventService
from trackmaster.application.services.data_event_service import page_offset
from trackmaster.domain.entities import ClientContext, DeviceInfo, Location
from trackmaster.domain.exceptions import InternalError, NotFoundError
from trackmaster.infrastructure.lookup import UserstackDeviceDetector
from tests.fakes import FakeDataEventRepository, FakeDeviceDetector, FakeIpGeolocator

CLIENT = ClientContext(ip="41.90.0.1", user_agent="Mozilla/5.0 (iPhone)", host="track.example.com")


@pytest.fixture
def detector() -> FakeDeviceDetector:
    return FakeDeviceDetector()


@pytest.fixture
def geolocator() -> FakeIpGeolocator:
    return FakeIpGeolocator()


@pytest.fixture
def service(detector, geolocator) -> DataEventService:
    return DataEventService(FakeDataEventRepository(), detector, geolocator, page_size=20)


@pytest.mark.asyncio
async def test_create_event_merges_lookups(service: DataEventService, detector, geolocator):
    event = await service.create_event(DataEventCreate(owner="John"), CLIENT)

    assert detector.calls == ["Mozilla/5.0 (iPhone)"]
    assert geolocator.calls == ["41.90.0.1"]
    assert event.ip == "41.90.0.1"
    assert event.domain == "track.example.com"
    assert event.host == "desktop"
    assert event.brand == "Apple"
    assert event.country == "Kenya"
    assert event.country_flag == "🇰🇪"
    assert event.isp == "Safaricom"
    assert event.isp_domain == "safaricom.co.ke"
    assert event.is_vpn is False
    assert event.is_new is True
    assert event.archive == "Unidentified"
    assert event.ip_details == "This is an ip address with the request made from Kenya"
    assert event.location == Location(latitude=-1.28, longitude=36.82)
    assert event.source == "from latitude: -1.28 and longitude: 36.82"


@pytest.mark.asyncio
async def test_client_coordinates_override_geolocation(service: DataEventService):
    data = DataEventCreate(owner="John", latlng={"latitude": 10, "longitude": 20})
    event = await service.create_event(data, CLIENT)
    assert event.location == Location(latitude=10, longitude=20)


@pytest.mark.asyncio
async def test_partial_coordinates_are_backfilled(service: DataEventService):
    data = DataEventCreate(owner="John", latlng={"latitude": 0})
    event = await service.create_event(data, CLIENT)
    assert event.location == Location(latitude=0, longitude=36.82)


@pytest.mark.asyncio
async def test_missing_brand_is_unidentified(geolocator):
    detector = FakeDeviceDetector(info=DeviceInfo(type="smartphone", brand=None))
    service = DataEventService(FakeDataEventRepository(), detector, geolocator)
    event = await service.create_event(DataEventCreate(owner="John", archive="3"), CLIENT)
    assert event.brand == "Unidentified"
    assert event.archive == "3"


@pytest.mark.asyncio
async def test_lookup_failure_becomes_internal_error(detector):
    repository = FakeDataEventRepository()
    service = DataEventService(repository, detector, FakeIpGeolocator(fail=True))
    with pytest.raises(InternalError) as exc_info:
        await service.create_event(DataEventCreate(owner="John"), CLIENT)
    assert exc_info.value.status_code == 500
    assert await repository.get_all() == []


@pytest.mark.parametrize(
    ("page", "expected"),
    [(1, 0), (2, 20), (3, 40), (0, 0), (-4, 0)],
)
def test_page_offset_is_clamped(page: int, expected: int):
    assert page_offset(page, 20) == expected


@pytest.mark.asyncio
async def test_list_events_pages_and_aggregates(service: DataEventService):
    for i in range(25):
        await service.create_event(DataEventCreate(owner=f"owner-{i % 2}"), CLIENT)

    everything = await service.list_events()
    second = await service.list_events(page=2)

    assert everything.hits == 25
    assert [e.id for e in second.events] == list(range(21, 26))
    assert second.hits == 5
    assert second.country_count == 1
    assert {(g.owner, g.count) for g in second.by_country_owner} == {
        ("owner-0", 13),
        ("owner-1", 12),
    }


@pytest.mark.asyncio
async def test_delete_missing_event(service: DataEventService):
    with pytest.raises(NotFoundError):
        await service.delete_event(99)


@pytest.mark.asyncio
async def test_non_json_lookup_answer_becomes_internal_error(geolocator):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="<html>rate limited</html>")

    detector = UserstackDeviceDetector(
        "key", http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler))
    )
    service = DataEventService(FakeDataEventRepository(), detector, geolocator)
    with pytest.raises(InternalError) as exc_info:
        await service.create_event(DataEventCreate(owner="John"), CLIENT)
    assert exc_info.value.message == "Registering data failed, please try again."


@pytest.mark.asyncio
@pytest.mark.parametrize("event_id", [0, -1, 2**31, 2**63])
async def test_ids_outside_storage_range_are_not_found(service: DataEventService, event_id: int):
    with pytest.raises(NotFoundError):
        await service.get_event(event_id)
    with pytest.raises(NotFoundError):
        await service.delete_event(event_id)
