from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException

from redis_console.core.common.exceptions import ConsoleError

logger = logging.getLogger(__name__)


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> Response:
    """Handle FastAPI request body validation errors.

    Args:
        request: The request that caused the exception
        exc: The validation exception

    Returns:
        JSON response with error details
    """
    if logger.isEnabledFor(logging.WARNING):
        logger.warning(f"Validation error: {exc.errors()}")

    error_details: list[dict[str, Any]] = []
    for error in exc.errors():
        error_details.append(
            {
                "loc": list(error.get("loc", [])),
                "msg": error.get("msg", ""),
                "type": error.get("type", ""),
            }
        )

    return JSONResponse(
        status_code=400,
        content={"error": "Invalid request", "details": {"errors": error_details}},
    )


async def http_exception_handler(request: Request, exc: HTTPException) -> Response:
    if logger.isEnabledFor(logging.WARNING):
        logger.warning(f"HTTP error {exc.status_code}: {exc.detail}")

    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def console_exception_handler(request: Request, exc: ConsoleError) -> Response:
    """Handle ConsoleError exceptions.

    The store's message is returned unmodified so the user sees the actual
    diagnostic.

    Args:
        request: The request that caused the exception
        exc: The ConsoleError exception

    Returns:
        A JSON response with error details
    """
    if logger.isEnabledFor(logging.WARNING):
        logger.warning(
            f"{exc.__class__.__name__} ({exc.status_code}) on {request.url.path}: {exc.message}"
        )
    if exc.details and logger.isEnabledFor(logging.DEBUG):
        logger.debug(f"Error details: {exc.details}")

    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.message, "kind": exc.kind.value},
    )


async def general_exception_handler(request: Request, exc: Exception) -> Response:
    logger.exception("Unhandled exception", exc_info=exc)

    return JSONResponse(
        status_code=500,
        content={"error": "Internal server error", "type": exc.__class__.__name__},
    )


def configure_exception_handlers(app: FastAPI) -> None:
    """Configure exception handlers for the FastAPI application.

    Args:
        app: The FastAPI application
    """
    app.add_exception_handler(RequestValidationError, validation_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(HTTPException, http_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(ConsoleError, console_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, general_exception_handler)
