"""Domain CRUD endpoints."""

from fastapi import APIRouter, Depends, status

from trackmaster.application.schemas import (
    DomainCreate,
    DomainEnvelope,
    DomainListResponse,
    DomainResponse,
    MessageResponse,
)
from trackmaster.application.services import DomainService
from trackmaster.infrastructure.dependencies import get_domain_service
from trackmaster.presentation.api.guards import require_identity

router = APIRouter(prefix="/domains", tags=["Domains"])


@router.get("", response_model=DomainListResponse)
async def list_domains(
    service: DomainService = Depends(get_domain_service),
) -> DomainListResponse:
    """Retrieve every registered domain."""
    domains = await service.list_domains()
    return DomainListResponse(domains=[DomainResponse.model_validate(d) for d in domains])


@router.get("/{did}", response_model=DomainEnvelope)
async def get_domain(
    did: int,
    service: DomainService = Depends(get_domain_service),
) -> DomainEnvelope:
    """Retrieve a single domain by ID."""
    domain = await service.get_domain(did)
    return DomainEnvelope(domain=DomainResponse.model_validate(domain))


@router.post(
    "",
    response_model=DomainResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_identity)],
)
async def create_domain(
    data: DomainCreate,
    service: DomainService = Depends(get_domain_service),
) -> DomainResponse:
    """Register a new domain; its URL must be unique."""
    domain = await service.create_domain(data)
    return DomainResponse.model_validate(domain)


@router.delete("/{did}", response_model=MessageResponse, dependencies=[Depends(require_identity)])
async def delete_domain(
    did: int,
    service: DomainService = Depends(get_domain_service),
) -> MessageResponse:
    """Delete a domain by ID."""
    await service.delete_domain(did)
    return MessageResponse(message="Deleted domain.")
