"""Device CRUD endpoints."""

from fastapi import APIRouter, Depends, status

from trackmaster.application.schemas import (
    DeviceCreate,
    DeviceEnvelope,
    DeviceListResponse,
    DeviceResponse,
    MessageResponse,
)
from trackmaster.application.services import DeviceService
from trackmaster.infrastructure.dependencies import get_device_service
from trackmaster.presentation.api.guards import require_identity

router = APIRouter(prefix="/device", tags=["Devices"])


@router.get("", response_model=DeviceListResponse)
async def list_devices(
    service: DeviceService = Depends(get_device_service),
) -> DeviceListResponse:
    devices = await service.list_devices()
    return DeviceListResponse(devices=[DeviceResponse.model_validate(d) for d in devices])


@router.get("/{did}", response_model=DeviceEnvelope)
async def get_device(
    did: int,
    service: DeviceService = Depends(get_device_service),
) -> DeviceEnvelope:
    device = await service.get_device(did)
    return DeviceEnvelope(device=DeviceResponse.model_validate(device))


@router.post(
    "",
    response_model=DeviceResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_identity)],
)
async def create_device(
    data: DeviceCreate,
    service: DeviceService = Depends(get_device_service),
) -> DeviceResponse:
    device = await service.create_device(data)
    return DeviceResponse.model_validate(device)


@router.delete("/{did}", response_model=MessageResponse, dependencies=[Depends(require_identity)])
async def delete_device(
    did: int,
    service: DeviceService = Depends(get_device_service),
) -> MessageResponse:
    await service.delete_device(did)
    return MessageResponse(message="Deleted device.")
