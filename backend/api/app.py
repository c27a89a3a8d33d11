"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from shared.config import Settings, get_settings
from shared.database import Database
from shared.exceptions import ExternalServiceError

from .dependencies import ServiceContainer
from .routes import auth, health, users

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Builds the service container and opens the database at startup, closes
    it at shutdown. A missing signing secret or database configuration
    raises ConfigurationError here, so the server refuses to start.
    A container passed to create_app() is used as-is and not closed.
    """
    settings: Settings = app.state.settings
    database: Optional[Database] = None

    # Startup
    if app.state.container is None:
        database = Database.from_settings(settings)
        app.state.container = ServiceContainer(settings, database=database)
        database.open()

    logger.info("Starting %s on %s:%s", settings.app_name, settings.host, settings.port)
    try:
        yield
    finally:
        # Shutdown
        if database is not None:
            database.close()
            app.state.container = None
        logger.info("Shutting down %s", settings.app_name)


async def external_service_error_handler(request: Request, exc: ExternalServiceError) -> JSONResponse:
    logger.error("%s failed during %s %s: %s", exc.service, request.method, request.url.path, exc.message)
    return JSONResponse(status_code=503, content=exc.to_dict())


def create_app(
    settings: Optional[Settings] = None,
    container: Optional[ServiceContainer] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Settings to use; defaults to the cached environment settings
        container: Prebuilt service container (tests); when omitted one is
            built during startup

    Returns:
        Configured FastAPI instance
    """
    settings = settings or (container.settings if container else get_settings())

    app = FastAPI(
        title=settings.app_name,
        description="Customer relationship management API",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url=f"{settings.api_prefix}/docs" if settings.debug else None,
        redoc_url=f"{settings.api_prefix}/redoc" if settings.debug else None,
    )
    app.state.settings = settings
    app.state.container = container

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    app.add_exception_handler(ExternalServiceError, external_service_error_handler)

    # Register routes
    prefix = settings.api_prefix
    app.include_router(health.router, prefix=prefix, tags=["health"])
    app.include_router(auth.router, prefix=f"{prefix}/auth", tags=["auth"])
    app.include_router(users.router, prefix=f"{prefix}/users", tags=["users"])

    return app


# Application instance for uvicorn
app = create_app()
