"""Translate exceptions into JSON error responses.

Every error body is either ``{"error": str}`` or, for request validation
failures, ``{"errors": [{"msg", "path", "location"}]}``.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import InterfaceError, OperationalError
from starlette.exceptions import HTTPException as StarletteHTTPException

from naai.database import connection_error_hints
from naai.errors import AppError, AuthError, ErrorKind, InfrastructureError

logger = logging.getLogger(__name__)

DATABASE_HINT = "Please check the database connection. See server logs for details."


def _error_response(exc: AppError) -> JSONResponse:
    content = {"error": exc.message}
    if exc.hint:
        content["message"] = exc.hint
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, AuthError) else None
    return JSONResponse(status_code=exc.status_code, content=content, headers=headers)


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Handle errors raised by services."""
    if exc.kind in (ErrorKind.INFRASTRUCTURE, ErrorKind.INTERNAL):
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return _error_response(exc)


def _format_validation_error(error: dict) -> dict:
    location, *path = error.get("loc") or ("body",)
    ctx = error.get("ctx") or {}
    if error.get("type") == "value_error" and "error" in ctx:
        msg = str(ctx["error"])
    else:
        msg = error.get("msg", "Invalid value")
    return {
        "msg": msg,
        "path": ".".join(str(part) for part in path),
        "location": str(location),
    }


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Reject malformed input with field-level details, never echoing the value."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"errors": [_format_validation_error(error) for error in exc.errors()]},
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Routing errors (unknown path, wrong method) in the common error shape."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def database_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """The database is unreachable: log how to fix it, tell the client nothing specific."""
    logger.error(f"{request.method} {request.url.path}: database connection error: {exc}")
    for hint in connection_error_hints(exc):
        logger.error(hint)
    return _error_response(InfrastructureError(hint=DATABASE_HINT))


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Anything else is a generic 500."""
    logger.exception(f"{request.method} {request.url.path} failed", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal server error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the error translators on the application."""
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(OperationalError, database_error_handler)
    app.add_exception_handler(InterfaceError, database_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
