"""
Main Application Entry Point.

This module initializes the FastAPI application, configures middleware (CORS)
and exception handlers, and includes all API routers.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from lesage_booking.core.config import settings
from lesage_booking.core.logging_config import get_logger, setup_logging

from .api.v1 import auth, health
from .core import constant
from .exception_handlers import setup_exception_handlers
from .services.deps import get_booking_client

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifespan events.

    Logs the backend in use on startup and closes the shared backend client on
    shutdown.
    """
    logger.info(f"Starting up {constant.PROJECT_NAME} companion server (backend: {settings.api_url})")

    yield

    logger.info(f"Shutting down {constant.PROJECT_NAME} companion server...")
    if get_booking_client.cache_info().currsize:
        get_booking_client().close()


def create_app() -> FastAPI:
    setup_logging()
    app = FastAPI(
        title=constant.PROJECT_NAME,
        description="""
        LE SAGE DEV Booking companion API

        Password recovery endpoints and the public sign-in configuration of the
        booking site.
        """,
        version=constant.VERSION,
        openapi_url=f"{constant.API_V1_STR}/openapi.json",
        docs_url=f"{constant.API_V1_STR}/docs",
        redoc_url=f"{constant.API_V1_STR}/redoc",
        lifespan=lifespan,
    )

    cors = settings.cors
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors.origins,
        allow_credentials=cors.allow_credentials,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    setup_exception_handlers(app)

    app.include_router(health.router, tags=["health"])
    app.include_router(auth.router, prefix=f"{constant.API_V1_STR}/auth", tags=["auth"])
    return app


app = create_app()


def run() -> None:
    """Serve the companion API with uvicorn on ``LESAGE_SERVER_HOST:LESAGE_SERVER_PORT``."""
    import uvicorn

    uvicorn.run(app, host=settings.server_host, port=settings.server_port, log_config=None)
