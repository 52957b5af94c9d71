"""Application factory for the city info API.

Mounts the API routers under their versioned prefixes. The lifespan opens
the city store and loads the seed data on startup.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from city_info.api.errors import register_exception_handlers
from city_info.api.versioning import api_version
from city_info.auth.dependencies import get_current_user
from city_info.config import get_settings
from city_info.database.connection import close_db, create_tables, get_db, init_db
from city_info.database.seed import seed_database

logger = logging.getLogger(__name__)

CITIES_API_VERSIONS = ("1", "2")
FILES_API_VERSIONS = ("1", "2")
FILES_DEPRECATED_API_VERSIONS = ("0.1",)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager.

    Handles startup and shutdown tasks:
    - Initialize database connection
    - Create tables and load the seed data
    - Clean up on shutdown
    """
    settings = get_settings()

    logger.info(f"Starting {settings.app_name} v{settings.app_version}")

    await init_db()

    if settings.database_create_tables:
        await create_tables()

    if settings.database_seed:
        async with get_db() as session:
            await seed_database(session)

    yield

    # Shutdown
    logger.info("Shutting down")
    await close_db()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Cities, their points of interest, and file transfer",
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        openapi_url="/openapi.json" if settings.debug else None,
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
        expose_headers=["X-Pagination"],
    )

    register_exception_handlers(app)

    # Include routers
    from city_info.api.routes import authentication, cities, files

    app.include_router(
        authentication.router,
        prefix="/api/authentication",
        tags=["Authentication"],
    )
    app.include_router(
        cities.router,
        prefix="/api/v{version}/cities",
        tags=["Cities"],
        dependencies=[
            Depends(get_current_user),
            Depends(api_version(CITIES_API_VERSIONS)),
        ],
    )
    app.include_router(
        files.router,
        prefix="/api/v{version}/files",
        tags=["Files"],
        dependencies=[
            Depends(get_current_user),
            Depends(api_version(FILES_API_VERSIONS, FILES_DEPRECATED_API_VERSIONS)),
        ],
    )

    # Health check endpoint
    @app.get("/health", tags=["Health"])
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "version": settings.app_version}

    return app
