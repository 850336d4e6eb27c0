"""Account endpoints: signup, login, listing and credential updates."""

from fastapi import APIRouter, Depends, status

from trackmaster.application.schemas import (
    LoginResponse,
    SignupResponse,
    UserCredentials,
    UserEnvelope,
    UserListResponse,
    UserResponse,
    UserUpdate,
)
from trackmaster.application.services import UserService
from trackmaster.domain.entities import Identity
from trackmaster.infrastructure.dependencies import get_user_service
from trackmaster.presentation.api.guards import require_identity

router = APIRouter(prefix="/users", tags=["Users"])


@router.post("/signup", response_model=SignupResponse, status_code=status.HTTP_201_CREATED)
async def signup(
    data: UserCredentials,
    service: UserService = Depends(get_user_service),
) -> SignupResponse:
    """Register a new account."""
    user = await service.signup(data.email, data.password)
    return SignupResponse(email=user.email)


@router.post("/login", response_model=LoginResponse)
async def login(
    data: UserCredentials,
    service: UserService = Depends(get_user_service),
) -> LoginResponse:
    """Exchange credentials for a bearer token valid for 20 days."""
    user, token = await service.login(data.email, data.password)
    return LoginResponse(user_id=user.id, email=user.email, token=token)


@router.get("", response_model=UserListResponse, dependencies=[Depends(require_identity)])
async def list_users(
    service: UserService = Depends(get_user_service),
) -> UserListResponse:
    """List every account, without password hashes."""
    users = await service.list_users()
    return UserListResponse(users=[UserResponse.model_validate(u) for u in users])


@router.get("/{uid}", response_model=UserEnvelope, dependencies=[Depends(require_identity)])
async def get_user(
    uid: int,
    service: UserService = Depends(get_user_service),
) -> UserEnvelope:
    user = await service.get_user(uid)
    return UserEnvelope(user=UserResponse.model_validate(user))


@router.patch("/{uid}", response_model=UserEnvelope)
async def update_user(
    uid: int,
    data: UserUpdate,
    identity: Identity = Depends(require_identity),
    service: UserService = Depends(get_user_service),
) -> UserEnvelope:
    """Change email and password; the current password is required."""
    user = await service.update_credentials(
        uid,
        email=data.email,
        password=data.password,
        current_password=data.current_password,
        identity=identity,
    )
    return UserEnvelope(user=UserResponse.model_validate(user))
