"""Section CRUD routes."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from homescreen.dependencies import get_repositories
from homescreen.repos import CrudService, Repositories
from homescreen.utils.route_handler import register_routes

router = APIRouter(prefix="/api/sections", tags=["sections"])


def get_section_service(repos: Repositories = Depends(get_repositories)) -> CrudService:
    return repos.sections


register_routes(router, resource_name="Section", get_service=get_section_service)
