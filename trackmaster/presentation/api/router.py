"""Top-level API router: mounts every resource under /api."""

from fastapi import APIRouter

from trackmaster.presentation.api.endpoints.health import router as health_router
from trackmaster.presentation.api.endpoints.users import router as users_router
from trackmaster.presentation.api.endpoints.domains import router as domains_router
from trackmaster.presentation.api.endpoints.details import router as details_router
from trackmaster.presentation.api.endpoints.data_events import router as data_router
from trackmaster.presentation.api.endpoints.devices import router as devices_router

router = APIRouter(prefix="/api")
router.include_router(health_router)
router.include_router(users_router)
router.include_router(domains_router)
router.include_router(details_router)
router.include_router(data_router)
router.include_router(devices_router)
