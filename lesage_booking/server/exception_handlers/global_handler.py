"""
Exception Handlers for the Companion Server.

Maps flow and backend errors to ``{"error": "..."}`` responses and provides a
global handler that logs any other unhandled exception with an error ID,
request context and full traceback.
"""

import traceback

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from lesage_booking.api.errors import BookingApiError
from lesage_booking.auth.errors import FlowError, ValidationError
from lesage_booking.core.logging_config import get_logger

logger = get_logger(__name__)


async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"error": str(exc)})


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed request bodies answer 400 with the first failing field."""
    errors = exc.errors()
    first = errors[0] if errors else {}
    field = ".".join(str(part) for part in first.get("loc", ())[1:])
    message = first.get("msg", "Invalid request")
    logger.debug(f"Request validation failed in {request.method} {request.url.path}: {errors}")
    return JSONResponse(status_code=400, content={"error": f"{field}: {message}" if field else message})


async def flow_error_handler(request: Request, exc: FlowError) -> JSONResponse:
    """Upstream refusals keep the backend's 4xx status; anything else is a 502."""
    upstream = getattr(exc.__cause__, "status_code", None)
    status_code = upstream if isinstance(upstream, int) and 400 <= upstream < 500 else 502
    logger.warning(f"Flow failed in {request.method} {request.url.path}: {exc} (upstream={upstream})")
    return JSONResponse(status_code=status_code, content={"error": str(exc)})


async def booking_api_error_handler(request: Request, exc: BookingApiError) -> JSONResponse:
    status_code = exc.status_code if exc.status_code and 400 <= exc.status_code < 500 else 502
    logger.error(f"Backend error in {request.method} {request.url.path}: {exc.message} (status={exc.status_code})")
    return JSONResponse(status_code=status_code, content={"error": exc.message})


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Global exception handler to log detailed error information.

    Args:
        request: The HTTP request that caused the exception
        exc: The exception that was raised

    Returns:
        JSONResponse with error details and error ID
    """
    error_id = id(exc)

    logger.error(
        f"Unhandled exception [{error_id}] in {request.method} {request.url.path}: {str(exc)}",
        exc_info=True,
        extra={
            "error_id": error_id,
            "method": request.method,
            "path": request.url.path,
            "query_params": dict(request.query_params),
            "client": request.client.host if request.client else "unknown",
            "error_type": type(exc).__name__,
            "traceback": traceback.format_exc(),
        },
    )

    return JSONResponse(
        status_code=500,
        content={
            "error": "Internal server error",
            "error_id": error_id,
            "error_type": type(exc).__name__,
        },
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """
    Register exception handlers with the FastAPI application.

    Args:
        app: The FastAPI application instance
    """
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(FlowError, flow_error_handler)
    app.add_exception_handler(BookingApiError, booking_api_error_handler)
    app.add_exception_handler(Exception, global_exception_handler)
    logger.debug("Exception handlers registered successfully")
