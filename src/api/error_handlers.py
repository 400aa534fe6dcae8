"""Translate every fault into a JSON error body with the right status."""

import logging
import traceback
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.api.schemas import ErrorResponse
from src.models import ApiError, ErrorKind

logger = logging.getLogger(__name__)


def _is_production(request: Request) -> bool:
    return request.app.state.config.is_production


def _render(error: ApiError, stack: Optional[str] = None) -> JSONResponse:
    if error.kind is ErrorKind.VALIDATION_FAILED:
        body = ErrorResponse(message=error.message, details=error.details)
    elif error.kind is ErrorKind.INTERNAL:
        body = ErrorResponse(message=error.message, stack=stack)
    elif error.kind in (ErrorKind.NOT_FOUND, ErrorKind.UNAUTHORIZED):
        body = ErrorResponse(message=error.message)
    else:
        raise ValueError(f"Unhandled error kind: {error.kind}")

    return JSONResponse(
        status_code=error.status_code,
        content=body.model_dump(exclude_none=True),
    )


async def handle_api_error(request: Request, exc: ApiError) -> JSONResponse:
    logger.info(f"{request.method} {request.url.path} failed: {exc.kind.name} {exc.message}")
    return _render(exc)


async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == ErrorKind.NOT_FOUND.status_code:
        return _render(ApiError.not_found("Route not found"))
    if exc.status_code == 405:
        message = "Method not allowed"
    else:
        message = str(exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(message=message).model_dump(exclude_none=True),
        headers=getattr(exc, "headers", None),
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")

    stack = None
    if not _is_production(request):
        stack = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    return _render(ApiError(ErrorKind.INTERNAL, "Internal Server Error"), stack=stack)


def register_error_handlers(app: FastAPI) -> None:
    """Install the handlers on ``app``."""
    app.add_exception_handler(ApiError, handle_api_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(Exception, handle_unexpected_error)
