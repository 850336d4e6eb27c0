"""Unit tests for the DeviceService and DetailService."""

import pytest

from trackmaster.application.schemas import DetailCreate, DeviceCreate
from trackmaster.application.services import DetailService, DeviceService
from trackmaster.domain.exceptions import NotFoundError
from tests.fakes import FakeDetailRepository, FakeDeviceRepository


@pytest.mark.asyncio
async def test_create_device_returns_its_own_fields():
    service = DeviceService(FakeDeviceRepository())
    device = await service.create_device(
        DeviceCreate(
            ip="192.168.0.1",
            name="My Laptop",
            user_agent="Mozilla/5.0",
            details="work machine",
            details_ip_info="office network",
        )
    )
    fetched = await service.get_device(device.id)
    assert fetched == device
    assert fetched.details_ip_info == "office network"


@pytest.mark.asyncio
async def test_delete_missing_device():
    service = DeviceService(FakeDeviceRepository())
    with pytest.raises(NotFoundError):
        await service.delete_device(7)


@pytest.mark.asyncio
async def test_create_and_list_details():
    service = DetailService(FakeDetailRepository())
    first = await service.create_detail(DetailCreate(ip="10.0.0.1", brand="Apple", host="mobile"))
    await service.create_detail(DetailCreate(ip="10.0.0.2", brand="Dell", host="desktop"))
    details = await service.list_details()
    assert [d.ip for d in details] == ["10.0.0.1", "10.0.0.2"]
    assert (await service.get_detail(first.id)).brand == "Apple"


@pytest.mark.asyncio
async def test_get_missing_detail():
    service = DetailService(FakeDetailRepository())
    with pytest.raises(NotFoundError):
        await service.get_detail(1)


@pytest.mark.asyncio
async def test_out_of_range_ids_are_not_found():
    devices = DeviceService(FakeDeviceRepository())
    details = DetailService(FakeDetailRepository())
    with pytest.raises(NotFoundError):
        await devices.get_device(9223372036854775808)
    with pytest.raises(NotFoundError):
        await details.delete_detail(0)
