"""Detail CRUD endpoints."""

from fastapi import APIRouter, Depends, status

from trackmaster.application.schemas import (
    DetailCreate,
    DetailEnvelope,
    DetailListResponse,
    DetailResponse,
    MessageResponse,
)
from trackmaster.application.services import DetailService
from trackmaster.infrastructure.dependencies import get_detail_service
from trackmaster.presentation.api.guards import require_identity

router = APIRouter(prefix="/details", tags=["Details"])


@router.get("", response_model=DetailListResponse)
async def list_details(
    service: DetailService = Depends(get_detail_service),
) -> DetailListResponse:
    details = await service.list_details()
    return DetailListResponse(details=[DetailResponse.model_validate(d) for d in details])


@router.get("/{did}", response_model=DetailEnvelope)
async def get_detail(
    did: int,
    service: DetailService = Depends(get_detail_service),
) -> DetailEnvelope:
    detail = await service.get_detail(did)
    return DetailEnvelope(detail=DetailResponse.model_validate(detail))


@router.post(
    "",
    response_model=DetailResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_identity)],
)
async def create_detail(
    data: DetailCreate,
    service: DetailService = Depends(get_detail_service),
) -> DetailResponse:
    detail = await service.create_detail(data)
    return DetailResponse.model_validate(detail)


@router.delete("/{did}", response_model=MessageResponse, dependencies=[Depends(require_identity)])
async def delete_detail(
    did: int,
    service: DetailService = Depends(get_detail_service),
) -> MessageResponse:
    await service.delete_detail(did)
    return MessageResponse(message="Deleted detail.")
