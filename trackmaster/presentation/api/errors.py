"""Error translator — turns every failure into ``{"message", "code"}``.

Registered once on the application; endpoints and services only raise.
"""

import logging
from pathlib import Path

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from trackmaster.application.validation import first_violation_message
from trackmaster.domain.exceptions import TrackmasterError

logger = logging.getLogger(__name__)

UNKNOWN_ROUTE_MESSAGE = "Could not find this route."
UNKNOWN_ERROR_MESSAGE = "An unknown error occurred."


def remember_upload(request: Request, path: str | Path) -> None:
    """Record a file written for this request so a failure can remove it."""
    request.state.uploaded_file = Path(path)


def _discard_upload(request: Request) -> None:
    uploaded = getattr(request.state, "uploaded_file", None)
    if uploaded is None:
        return
    try:
        Path(uploaded).unlink(missing_ok=True)
    except OSError as e:
        logger.warning("Could not delete upload %s: %s", uploaded, e)


def _error_response(
    request: Request,
    status_code: int,
    message: str,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    _discard_upload(request)
    return JSONResponse(
        status_code=status_code,
        content={"message": message, "code": status_code},
        headers=headers,
    )


async def handle_trackmaster_error(request: Request, exc: TrackmasterError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
    return _error_response(request, exc.status_code, exc.message, headers)


async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    return _error_response(
        request,
        422,
        first_violation_message(exc.errors()),
    )


async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    # a known path with an undeclared method is not a route either
    if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
        return _error_response(request, status.HTTP_404_NOT_FOUND, UNKNOWN_ROUTE_MESSAGE)
    return _error_response(
        request, exc.status_code, str(exc.detail), getattr(exc, "headers", None)
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return _error_response(
        request, status.HTTP_500_INTERNAL_SERVER_ERROR, UNKNOWN_ERROR_MESSAGE
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the error translator on ``app``.

    Starlette never re-handles a failure once the response has started; the
    error is re-raised to the server instead.
    """
    app.add_exception_handler(TrackmasterError, handle_trackmaster_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(Exception, handle_unexpected_error)
