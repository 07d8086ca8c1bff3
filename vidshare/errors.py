"""Application errors and the JSON error envelope."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from vidshare.config import get_settings

logger = logging.getLogger(__name__)


class AppError(Exception):
    """Base error carrying an HTTP status code."""

    def __init__(self, status_code: int, message: str, is_operational: bool = True):
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.is_operational = is_operational


class BadRequestError(AppError):
    def __init__(self, message: str = "Bad Request"):
        super().__init__(400, message)


class UnauthorizedError(AppError):
    def __init__(self, message: str = "Unauthorized"):
        super().__init__(401, message)


class ForbiddenError(AppError):
    def __init__(self, message: str = "Forbidden"):
        super().__init__(403, message)


class NotFoundError(AppError):
    def __init__(self, message: str = "Not Found"):
        super().__init__(404, message)


class ConflictError(AppError):
    def __init__(self, message: str = "Conflict"):
        super().__init__(409, message)


class InternalServerError(AppError):
    def __init__(self, message: str = "Internal Server Error"):
        super().__init__(500, message, is_operational=False)


def _error_body(message: str, **extra) -> dict:
    return {"success": False, "message": message, **extra}


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    logger.error(
        "%d - %s - %s - %s", exc.status_code, exc.message, request.url.path, request.method
    )
    return JSONResponse(status_code=exc.status_code, content=_error_body(exc.message))


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == 404 and exc.detail == "Not Found":
        message = "Route not found"
    else:
        message = str(exc.detail)
    logger.warning("%d - %s - %s - %s", exc.status_code, message, request.url.path, request.method)
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(message),
        headers=getattr(exc, "headers", None),
    )


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()))
        message = f"{location}: {first.get('msg', 'Invalid request')}"
    else:
        message = "Invalid request"
    logger.warning("400 - %s - %s - %s", message, request.url.path, request.method)
    return JSONResponse(status_code=400, content=_error_body(message))


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("500 - %s - %s - %s", exc, request.url.path, request.method)
    extra = {}
    if get_settings().is_development:
        extra["error"] = str(exc)
    return JSONResponse(status_code=500, content=_error_body("Internal Server Error", **extra))


def register_exception_handlers(app: FastAPI) -> None:
    """Install the centralized error handlers on app."""
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
