"""Movie service: plain CRUD."""

from __future__ import annotations

from homescreen.repos.crud_service import CrudService, create_crud_service
from homescreen.repos.document_model import DocumentModel


def create_movie_service(model: DocumentModel) -> CrudService:
    return create_crud_service(model=model, entity_name="Movie")
