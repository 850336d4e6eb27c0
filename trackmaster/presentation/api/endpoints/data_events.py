"""Data event endpoints: enriched visitor hits with pagination and aggregates."""

from fastapi import APIRouter, Depends, Query, Request, status

from trackmaster.application.schemas import (
    CountryOwnerCountResponse,
    DataEventCreate,
    DataEventEnvelope,
    DataEventListResponse,
    DataEventResponse,
    MessageResponse,
)
from trackmaster.application.services import DataEventService
from trackmaster.domain.entities import ClientContext
from trackmaster.infrastructure.dependencies import get_data_event_service
from trackmaster.presentation.api.guards import require_identity

router = APIRouter(prefix="/data", tags=["Data"])


def _client_context(request: Request) -> ClientContext:
    """Collect the caller facts used for enrichment."""
    return ClientContext(
        ip=request.client.host if request.client else "",
        user_agent=request.headers.get("user-agent", ""),
        host=request.headers.get("host", ""),
    )


@router.get("", response_model=DataEventListResponse)
async def list_data(
    page: int | None = Query(None, description="1-based page of 20 events; omit for all"),
    service: DataEventService = Depends(get_data_event_service),
) -> DataEventListResponse:
    """List data events with distinct-country and (country, owner) counts."""
    result = await service.list_events(page)
    return DataEventListResponse(
        data=[DataEventResponse.model_validate(e) for e in result.events],
        nbr_countries=result.country_count,
        nbr_data_hits=result.hits,
        users=[CountryOwnerCountResponse.model_validate(g) for g in result.by_country_owner],
    )


@router.get("/{did}", response_model=DataEventEnvelope)
async def get_data(
    did: int,
    service: DataEventService = Depends(get_data_event_service),
) -> DataEventEnvelope:
    event = await service.get_event(did)
    return DataEventEnvelope(data=DataEventResponse.model_validate(event))


@router.post(
    "",
    response_model=DataEventResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_identity)],
)
async def create_data(
    data: DataEventCreate,
    request: Request,
    service: DataEventService = Depends(get_data_event_service),
) -> DataEventResponse:
    """Record a hit, enriched with device detection and IP geolocation."""
    event = await service.create_event(data, _client_context(request))
    return DataEventResponse.model_validate(event)


@router.delete("/{did}", response_model=MessageResponse, dependencies=[Depends(require_identity)])
async def delete_data(
    did: int,
    service: DataEventService = Depends(get_data_event_service),
) -> MessageResponse:
    await service.delete_event(did)
    return MessageResponse(message="Deleted data.")
