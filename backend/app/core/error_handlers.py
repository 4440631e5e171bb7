"""AssetTrack — Global exception handlers.

Every error leaves the API in the same envelope as a failed service result.
Internal details are suppressed unless DEBUG is on.
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config import get_settings
from app.core.responses import envelope
from app.schemas.common import Result

logger = logging.getLogger(__name__)


def _error_response(status_code: int, result: Result, headers: dict | None = None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=envelope(result), headers=headers)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    detail = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
    return _error_response(exc.status_code, Result.fail(detail), getattr(exc, "headers", None))


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Request body/query errors -> 400 with one entry per offending field."""
    details = []
    for err in exc.errors():
        loc = ".".join(str(part) for part in err.get("loc", []) if part != "body")
        msg = err.get("msg", "Invalid value")
        details.append(f"{loc}: {msg}" if loc else msg)
    return _error_response(status.HTTP_400_BAD_REQUEST, Result.failure(details, "Validation failed"))


async def sqlalchemy_exception_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.error("Database error on %s %s: %s", request.method, request.url.path, exc, exc_info=True)
    message = "A database error occurred. Please try again later."
    if get_settings().DEBUG:
        message = f"Database error: {exc}"
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, Result.fail(message))


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled exception on %s %s", request.method, request.url.path, exc_info=exc)
    message = "An unexpected error occurred. Please try again later."
    if get_settings().DEBUG:
        message = f"Internal error: {exc}"
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, Result.fail(message))


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(SQLAlchemyError, sqlalchemy_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
