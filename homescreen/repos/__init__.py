"""
Repository layer for the home screen CMS.

All MongoDB access lives here and ONLY here. No database access outside this module.
"""

from __future__ import annotations

from dataclasses import dataclass

from homescreen.db import MongoConnection
from homescreen.repos.crud_service import CrudService, create_crud_service
from homescreen.repos.document_model import DocumentModel
from homescreen.repos.movie_repo import create_movie_service
from homescreen.repos.registry import DocumentModels, build_document_models
from homescreen.repos.screen_configuration_repo import ScreenConfigurationRepo
from homescreen.repos.section_repo import create_section_service


@dataclass(frozen=True)
class Repositories:
    """Every service the routes need, bound to one connection."""

    models: DocumentModels
    movies: CrudService
    sections: CrudService
    screen_configurations: ScreenConfigurationRepo


def build_repositories(connection: MongoConnection) -> Repositories:
    models = build_document_models(connection)
    return Repositories(
        models=models,
        movies=create_movie_service(models.movie),
        sections=create_section_service(models.section),
        screen_configurations=ScreenConfigurationRepo(models),
    )


__all__ = [
    "CrudService",
    "DocumentModel",
    "DocumentModels",
    "Repositories",
    "ScreenConfigurationRepo",
    "build_repositories",
    "create_crud_service",
]
