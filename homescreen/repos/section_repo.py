"""Section service: CRUD with the hero-slider items rule.

Only section types in SECTIONS_WITH_MOVIES keep a hand-picked list of movies.
For every other type the stored ``items`` list is forced to ``[]``.
"""

from __future__ import annotations

import logging
from typing import Any

from homescreen.models.section import keeps_movie_items
from homescreen.repos.crud_service import CreateFn, CrudService, UpdateFn, create_crud_service
from homescreen.repos.document_model import DocumentModel
from homescreen.utils.document_formatter import FormattedDocument, format_document

logger = logging.getLogger(__name__)


def _strip_items(data: dict[str, Any]) -> dict[str, Any]:
    return {**{k: v for k, v in data.items() if k != "items"}, "items": []}


def _create_section_fn(model: DocumentModel) -> CreateFn:
    async def create_section(data: dict[str, Any]) -> FormattedDocument:
        try:
            if not keeps_movie_items(data.get("type")) and data.get("items"):
                data = _strip_items(data)
            section = await model.create(data)
            return format_document(section)
        except Exception:
            logger.exception("Error creating section")
            raise

    return create_section


def _update_section_fn(model: DocumentModel) -> UpdateFn:
    async def update_section(section_id: str, data: dict[str, Any]) -> FormattedDocument | None:
        try:
            if data.get("type") or data.get("items"):
                current = await model.find_by_id(section_id)
                if current is None:
                    return None

                section_type = data.get("type") or current.get("type")
                if not keeps_movie_items(section_type) and data.get("items"):
                    data = _strip_items(data)

            section = await model.find_by_id_and_update(section_id, data)
            return format_document(section) if section else None
        except Exception:
            logger.exception("Error updating section")
            raise

    return update_section


def create_section_service(model: DocumentModel) -> CrudService:
    return create_crud_service(
        model=model,
        entity_name="Section",
        custom_create=_create_section_fn(model),
        custom_update=_update_section_fn(model),
    )
