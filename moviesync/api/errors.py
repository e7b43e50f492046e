"""
Exception handlers mapping domain errors to HTTP responses.

Every error response has the body
``{"statusCode", "timestamp", "path", "message"}`` plus ``errors`` for
request validation failures.
"""

import logging
from datetime import datetime, timezone
from typing import Any

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from moviesync.core.exceptions import (
    ConfigurationError,
    DuplicateMovie,
    MovieSyncError,
    NotFound,
    PersistenceFailure,
    UpstreamRequestError,
    UpstreamValidationError,
)

logger = logging.getLogger(__name__)

STATUS_BY_ERROR: list[tuple[type[MovieSyncError], int]] = [
    (UpstreamValidationError, 400),
    (NotFound, 404),
    (DuplicateMovie, 409),
    (UpstreamRequestError, 502),
    (PersistenceFailure, 500),
    (ConfigurationError, 500),
]


def status_for(exc: MovieSyncError) -> int:
    """HTTP status code for a domain error."""
    for error_type, status_code in STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return status_code
    return 500


def error_response(request: Request, status_code: int, message: str, errors: Any = None) -> JSONResponse:
    body = {
        "statusCode": status_code,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "path": request.url.path,
        "message": message,
    }
    if errors:
        body["errors"] = jsonable_encoder(errors)
    return JSONResponse(status_code=status_code, content=body)


async def handle_domain_error(request: Request, exc: MovieSyncError) -> JSONResponse:
    status_code = status_for(exc)
    if status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    return error_response(request, status_code, str(exc))


async def handle_http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return error_response(request, exc.status_code, str(exc.detail))


async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    return error_response(request, 400, "Validation failed", errors=exc.errors())


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return error_response(request, 500, "Internal server error")


def register_exception_handlers(app: FastAPI) -> None:
    """Install the error handlers on ``app``."""
    app.add_exception_handler(MovieSyncError, handle_domain_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
