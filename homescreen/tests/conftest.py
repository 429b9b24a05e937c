"""
Pytest configuration and fixtures for home screen CMS tests.

MongoDB is replaced by mongomock-motor; blob storage by an AsyncMock.
"""

from __future__ import annotations

import os
from unittest.mock import AsyncMock
from uuid import uuid4

import httpx
import pytest_asyncio
from mongomock_motor import AsyncMongoMockClient

# Set test environment variables before importing config
os.environ.setdefault("MONGODB_URI", "mongodb://localhost:27017")
os.environ.setdefault("MONGODB_DATABASE", "homescreen_test")
os.environ.setdefault("S3_ENDPOINT", "http://localhost:4568")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from homescreen.db import MongoConnection  # noqa: E402
from homescreen.main import create_app  # noqa: E402
from homescreen.repos import build_repositories  # noqa: E402
from homescreen.services.storage import StorageService  # noqa: E402


def mock_client_factory(_uri: str) -> AsyncMongoMockClient:
    return AsyncMongoMockClient()


@pytest_asyncio.fixture(loop_scope="session")
async def connection():
    """A connected MongoConnection over a fresh in-memory database."""
    conn = MongoConnection("mongodb://test", f"homescreen_test_{uuid4().hex}", client_factory=mock_client_factory)
    await conn.connect()
    yield conn


@pytest_asyncio.fixture(loop_scope="session")
async def repos(connection):
    """All services bound to the test connection."""
    return build_repositories(connection)


@pytest_asyncio.fixture(loop_scope="session")
async def storage():
    """Blob storage stand-in with the StorageService interface."""
    mock = AsyncMock(spec=StorageService)
    mock.upload_file.side_effect = lambda key, body, content_type: f"http://files.test/{key}"
    mock.generate_presigned_download_url.return_value = "http://files.test/signed"
    return mock


@pytest_asyncio.fixture(loop_scope="session")
async def app(connection, storage):
    return create_app(connection=connection, storage=storage)


@pytest_asyncio.fixture(loop_scope="session")
async def async_client(app):
    """Async HTTP client against the ASGI app."""
    async with httpx.AsyncClient(
        transport=httpx.ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as client:
        yield client
