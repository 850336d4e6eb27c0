"""Liveness and database reachability."""

from fastapi import APIRouter

from trackmaster.config import get_settings
from trackmaster.domain.exceptions import InternalError
from trackmaster.infrastructure.database.session import ping_database

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check() -> dict:
    """Report version and environment; 503 when the database does not answer."""
    if not await ping_database():
        raise InternalError("Database is unreachable.", status_code=503)
    settings = get_settings()
    return {
        "status": "healthy",
        "version": settings.app_version,
        "environment": settings.app_env,
        "database": "ok",
    }
