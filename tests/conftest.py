"""Shared pytest configuration.

Environment must be set before ``trackmaster`` is imported: settings and the
database engine are built once at import time.
"""

import os
import tempfile

_DB_DIR = tempfile.mkdtemp(prefix="trackmaster-tests-")

os.environ["DATABASE_URL"] = f"sqlite:///{_DB_DIR}/trackmaster.db"
os.environ["APP_ENV"] = "test"
os.environ.setdefault("JWT_KEY", "test-secret-key")
os.environ.setdefault("PASSWORD_HASH_ROUNDS", "4")
os.environ.setdefault("USERSTACK_ACCESS_KEY", "test-userstack-key")
os.environ.setdefault("ABSTRACT_API_KEY", "test-abstract-key")

import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from tests.fakes import FakeDeviceDetector, FakeIpGeolocator  # noqa: E402


@pytest_asyncio.fixture
async def client():
    """HTTP client bound to the app, with fresh tables and fake lookup services."""
    from trackmaster.infrastructure.database import Base, engine
    from trackmaster.infrastructure.dependencies import get_device_detector, get_ip_geolocator
    from trackmaster.main import app

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    app.dependency_overrides[get_device_detector] = lambda: FakeDeviceDetector()
    app.dependency_overrides[get_ip_geolocator] = lambda: FakeIpGeolocator()

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as http_client:
        yield http_client

    app.dependency_overrides.clear()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def auth_headers(client: AsyncClient) -> dict[str, str]:
    """Sign up and log in a user; returns the bearer header."""
    credentials = {"email": "owner@example.com", "password": "s3cret-pass"}
    await client.post("/api/users/signup", json=credentials)
    response = await client.post("/api/users/login", json=credentials)
    return {"Authorization": f"Bearer {response.json()['token']}"}
