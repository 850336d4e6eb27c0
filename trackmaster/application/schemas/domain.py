"""Pydantic DTOs (Data Transfer Objects) for the Domain feature."""

from datetime import datetime

from pydantic import Field

from trackmaster.application.schemas.base import CamelModel
from trackmaster.application.validation import RequiredText


class DomainCreate(CamelModel):
    """Schema for registering a new domain."""

    domain_name: RequiredText = Field(..., examples=["example.com"])
    url: RequiredText = Field(..., examples=["https://www.example.com/"])
    owner: RequiredText = Field(..., examples=["John Doe"])


class DomainResponse(CamelModel):
    """Schema returned to the client."""

    id: int
    domain_name: str
    url: str
    owner: str
    created_at: datetime
    updated_at: datetime


class DomainEnvelope(CamelModel):
    domain: DomainResponse


class DomainListResponse(CamelModel):
    domains: list[DomainResponse]
