"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from trackmaster.application.interfaces import (
    DeviceDetector,
    IpGeolocator,
    PasswordHasher,
    TokenIssuer,
)
from trackmaster.application.services import (
    DataEventService,
    DetailService,
    DeviceService,
    DomainService,
    UserService,
)
from trackmaster.config import get_settings
from trackmaster.infrastructure.database.session import get_db_session
from trackmaster.infrastructure.database.repositories import (
    SQLAlchemyDataEventRepository,
    SQLAlchemyDetailRepository,
    SQLAlchemyDeviceRepository,
    SQLAlchemyDomainRepository,
    SQLAlchemyUserRepository,
)
from trackmaster.infrastructure.lookup import AbstractIpGeolocator, UserstackDeviceDetector
from trackmaster.infrastructure.security.passwords import BcryptPasswordHasher
from trackmaster.infrastructure.security.tokens import JoseTokenIssuer


def get_password_hasher() -> PasswordHasher:
    settings = get_settings()
    return BcryptPasswordHasher(rounds=settings.password_hash_rounds)


def get_token_issuer() -> TokenIssuer:
    settings = get_settings()
    return JoseTokenIssuer(
        secret=settings.jwt_key,
        algorithm=settings.jwt_algorithm,
        expires_days=settings.jwt_expires_days,
    )


def get_device_detector() -> DeviceDetector:
    settings = get_settings()
    return UserstackDeviceDetector(
        access_key=settings.userstack_access_key,
        base_url=settings.userstack_base_url,
        timeout=settings.lookup_timeout,
    )


def get_ip_geolocator() -> IpGeolocator:
    settings = get_settings()
    return AbstractIpGeolocator(
        api_key=settings.abstract_api_key,
        base_url=settings.abstract_geolocation_url,
        timeout=settings.lookup_timeout,
    )


async def get_user_service(
    session: AsyncSession = Depends(get_db_session),
    hasher: PasswordHasher = Depends(get_password_hasher),
    token_issuer: TokenIssuer = Depends(get_token_issuer),
) -> AsyncGenerator[UserService, None]:
    """Provides a UserService with its repository, hasher and token issuer wired up."""
    yield UserService(SQLAlchemyUserRepository(session), hasher, token_issuer)


async def get_domain_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[DomainService, None]:
    """Provides a DomainService instance with its repository wired up."""
    yield DomainService(SQLAlchemyDomainRepository(session))


async def get_device_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[DeviceService, None]:
    """Provides a DeviceService instance with its repository wired up."""
    yield DeviceService(SQLAlchemyDeviceRepository(session))


async def get_detail_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[DetailService, None]:
    """Provides a DetailService instance with its repository wired up."""
    yield DetailService(SQLAlchemyDetailRepository(session))


async def get_data_event_service(
    session: AsyncSession = Depends(get_db_session),
    device_detector: DeviceDetector = Depends(get_device_detector),
    geolocator: IpGeolocator = Depends(get_ip_geolocator),
) -> AsyncGenerator[DataEventService, None]:
    """Provides a DataEventService with its repository and both lookup clients."""
    settings = get_settings()
    yield DataEventService(
        SQLAlchemyDataEventRepository(session),
        device_detector=device_detector,
        geolocator=geolocator,
        page_size=settings.data_page_size,
    )
