"""
Home screen CMS FastAPI application.

Entry point for the API server.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from homescreen.config import settings
from homescreen.db import MongoConnection
from homescreen.repos import build_repositories
from homescreen.routes import movies as movie_routes
from homescreen.routes import screen as screen_routes
from homescreen.routes import screen_configurations as screen_configuration_routes
from homescreen.routes import sections as section_routes
from homescreen.routes import storage as storage_routes
from homescreen.services.storage import StorageService
from homescreen.utils.api_response import register_exception_handlers

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for FastAPI application.

    Handles startup and shutdown logic:
    - Connect to MongoDB
    - Make sure the storage bucket exists
    - Close the MongoDB connection on shutdown
    """
    connection: MongoConnection = app.state.connection
    await connection.connect()

    try:
        await app.state.storage.ensure_bucket()
    except Exception:
        # Uploads fail until storage is reachable; the CRUD API still works.
        logger.exception("Error initializing storage bucket")

    yield

    await connection.close()


def create_app(
    connection: MongoConnection | None = None,
    storage: StorageService | None = None,
) -> FastAPI:
    """
    Build the application.

    Args:
        connection: MongoDB connection (default from settings)
        storage: Blob storage service (default from settings)

    Returns:
        Configured FastAPI app
    """
    configure_logging()

    app = FastAPI(title="Home Screen CMS", lifespan=lifespan)

    app.state.connection = connection or MongoConnection.from_settings()
    app.state.storage = storage or StorageService()
    app.state.repositories = build_repositories(app.state.connection)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    # Register routes
    app.include_router(movie_routes.router)
    app.include_router(section_routes.router)
    app.include_router(screen_configuration_routes.router)
    app.include_router(screen_routes.router)
    app.include_router(storage_routes.router)

    @app.get("/health")
    async def health():
        """Health check endpoint for uptime monitoring."""
        return {"status": "ok"}

    return app


app = create_app()


def run() -> None:
    """Run the API server."""
    uvicorn.run("homescreen.main:app", host=settings.HOST, port=settings.PORT)
