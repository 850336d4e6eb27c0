"""Unit tests for the error translator."""

from pathlib import Path

import pytest
from fastapi import FastAPI, Request
from httpx import ASGITransport, AsyncClient

from trackmaster.domain.exceptions import AuthError, NotFoundError
from trackmaster.presentation.api.errors import register_exception_handlers, remember_upload


def _app(upload: Path) -> FastAPI:
    app = FastAPI()
    register_exception_handlers(app)

    @app.post("/upload")
    async def upload_then_fail(request: Request):
        upload.write_text("partial")
        remember_upload(request, upload)
        raise NotFoundError("place", 3)

    @app.get("/private")
    async def private():
        raise AuthError()

    @app.get("/boom")
    async def boom():
        raise RuntimeError("database password is hunter2")

    return app


async def _request(app: FastAPI, method: str, path: str):
    # raise_app_exceptions=False: Starlette re-raises unhandled errors after answering
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        return await client.request(method, path)


@pytest.mark.asyncio
async def test_failed_request_discards_its_upload(tmp_path: Path):
    upload = tmp_path / "image.png"
    response = await _request(_app(upload), "POST", "/upload")

    assert response.status_code == 404
    assert response.json() == {"message": "Could not find place for id '3'.", "code": 404}
    assert not upload.exists()


@pytest.mark.asyncio
async def test_auth_error_carries_challenge(tmp_path: Path):
    response = await _request(_app(tmp_path / "unused"), "GET", "/private")
    assert response.status_code == 401
    assert response.json() == {"message": "Authentication failed!", "code": 401}
    assert response.headers["www-authenticate"] == "Bearer"


@pytest.mark.asyncio
async def test_unknown_route(tmp_path: Path):
    response = await _request(_app(tmp_path / "unused"), "GET", "/nowhere")
    assert response.status_code == 404
    assert response.json() == {"message": "Could not find this route.", "code": 404}


@pytest.mark.asyncio
async def test_unexpected_error_hides_details(tmp_path: Path):
    response = await _request(_app(tmp_path / "unused"), "GET", "/boom")
    assert response.status_code == 500
    assert response.json() == {"message": "An unknown error occurred.", "code": 500}
    assert "hunter2" not in response.text


@pytest.mark.asyncio
async def test_undeclared_method_answers_like_unknown_route(tmp_path: Path):
    response = await _request(_app(tmp_path / "unused"), "PUT", "/private")
    assert response.status_code == 404
    assert response.json() == {"message": "Could not find this route.", "code": 404}
    assert "allow" not in response.headers
