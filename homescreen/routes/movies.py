"""Movie CRUD routes."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from homescreen.dependencies import get_repositories
from homescreen.repos import CrudService, Repositories
from homescreen.utils.route_handler import register_routes

router = APIRouter(prefix="/api/movies", tags=["movies"])


def get_movie_service(repos: Repositories = Depends(get_repositories)) -> CrudService:
    return repos.movies


register_routes(router, resource_name="Movie", get_service=get_movie_service)
