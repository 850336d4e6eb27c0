"""Pydantic DTOs (Data Transfer Objects) for the User feature."""

from datetime import datetime

from pydantic import Field

from trackmaster.application.schemas.base import CamelModel
from trackmaster.application.validation import NormalizedEmail, Password, RequiredText


class UserCredentials(CamelModel):
    """Body of signup and login requests."""

    email: NormalizedEmail = Field(..., examples=["john.doe@example.com"])
    password: Password = Field(..., examples=["abcdefgh"])


class UserUpdate(CamelModel):
    """Body of a credential update: the current password must be re-entered."""

    email: NormalizedEmail
    password: Password
    current_password: RequiredText


class UserResponse(CamelModel):
    """Public view of a user: never includes the password hash."""

    id: int
    email: str
    created_at: datetime
    updated_at: datetime


class SignupResponse(CamelModel):
    email: str


class LoginResponse(CamelModel):
    user_id: int
    email: str
    token: str


class UserEnvelope(CamelModel):
    user: UserResponse


class UserListResponse(CamelModel):
    users: list[UserResponse]
