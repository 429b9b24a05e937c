"""FastAPI dependencies resolving per-application services."""

from __future__ import annotations

from fastapi import Request

from homescreen.repos import Repositories
from homescreen.services.storage import StorageService


def get_repositories(request: Request) -> Repositories:
    return request.app.state.repositories


def get_storage(request: Request) -> StorageService:
    return request.app.state.storage
