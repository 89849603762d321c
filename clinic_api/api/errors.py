"""
clinic_api/api/errors.py — Error type and handlers.

Every JSON error response has the same shape: ``{"error": "<message>"}``.
"""
from __future__ import annotations

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = structlog.get_logger(__name__)

MALFORMED_BODY = "Malformed request body."


class ApiError(Exception):
    """Raised by handlers to answer with ``status_code`` and an error message."""

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message


class InvalidIdError(ApiError):
    def __init__(self) -> None:
        super().__init__(status.HTTP_400_BAD_REQUEST, "Invalid id.")


class NotFoundError(ApiError):
    def __init__(self, entity: str) -> None:
        super().__init__(status.HTTP_404_NOT_FOUND, f"{entity} not found.")


class MissingNameError(ApiError):
    def __init__(self, entity: str) -> None:
        super().__init__(status.HTTP_400_BAD_REQUEST, f"{entity} needs a name parameter.")


def error_response(status_code: int, message: str, headers: dict[str, str] | None = None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers)


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    logger.debug("api_error", path=request.url.path, status=exc.status_code, error=exc.message)
    return error_response(exc.status_code, exc.message)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info("malformed_request", path=request.url.path, errors=exc.errors())
    return error_response(status.HTTP_400_BAD_REQUEST, MALFORMED_BODY)


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return error_response(exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
