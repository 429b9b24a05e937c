"""
Generic CRUD services.

create_crud_service() assembles the five standard operations for a
DocumentModel. Any operation can be replaced per resource by passing a
custom implementation; the choice is made once, at construction.

Contract for every default operation:
- results are formatted with format_document()
- "not found" is None (never an exception)
- storage failures are logged and re-raised
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any

from homescreen.repos.document_model import DocumentModel
from homescreen.utils.document_formatter import FormattedDocument, format_document
from homescreen.utils.query_builder import QueryOptions, build_mongo_query

logger = logging.getLogger(__name__)

CreateFn = Callable[[dict[str, Any]], Awaitable[FormattedDocument]]
GetByIdFn = Callable[[str], Awaitable[FormattedDocument | None]]
GetManyFn = Callable[[QueryOptions | None], Awaitable[list[FormattedDocument]]]
UpdateFn = Callable[[str, dict[str, Any]], Awaitable[FormattedDocument | None]]
DeleteFn = Callable[[str], Awaitable[FormattedDocument | None]]


@dataclass(frozen=True)
class CrudService:
    """The five operations exposed for one resource."""

    entity_name: str
    create: CreateFn
    get_by_id: GetByIdFn
    get_many: GetManyFn
    update: UpdateFn
    delete: DeleteFn


def create_get_many_fn(model: DocumentModel, entity_name: str) -> GetManyFn:
    async def get_many(options: QueryOptions | None = None) -> list[FormattedDocument]:
        try:
            query, sort = build_mongo_query(options)
            docs = await model.find(query, sort)
            return [format_document(doc) for doc in docs]
        except Exception:
            logger.exception("Error fetching %s list", entity_name)
            raise

    return get_many


def create_get_by_id_fn(model: DocumentModel, entity_name: str) -> GetByIdFn:
    async def get_by_id(doc_id: str) -> FormattedDocument | None:
        try:
            doc = await model.find_by_id(doc_id)
            return format_document(doc) if doc else None
        except Exception:
            logger.exception("Error fetching %s by id", entity_name)
            raise

    return get_by_id


def create_create_fn(model: DocumentModel, entity_name: str) -> CreateFn:
    async def create(data: dict[str, Any]) -> FormattedDocument:
        try:
            doc = await model.create(data)
            return format_document(doc)
        except Exception:
            logger.exception("Error creating %s", entity_name)
            raise

    return create


def create_update_fn(model: DocumentModel, entity_name: str) -> UpdateFn:
    async def update(doc_id: str, data: dict[str, Any]) -> FormattedDocument | None:
        try:
            doc = await model.find_by_id_and_update(doc_id, data)
            return format_document(doc) if doc else None
        except Exception:
            logger.exception("Error updating %s", entity_name)
            raise

    return update


def create_delete_fn(model: DocumentModel, entity_name: str) -> DeleteFn:
    async def delete(doc_id: str) -> FormattedDocument | None:
        try:
            doc = await model.find_by_id_and_delete(doc_id)
            return format_document(doc) if doc else None
        except Exception:
            logger.exception("Error deleting %s", entity_name)
            raise

    return delete


def create_crud_service(
    model: DocumentModel,
    entity_name: str,
    custom_create: CreateFn | None = None,
    custom_get_by_id: GetByIdFn | None = None,
    custom_get_many: GetManyFn | None = None,
    custom_update: UpdateFn | None = None,
    custom_delete: DeleteFn | None = None,
) -> CrudService:
    """
    Build a CrudService, using the custom operation where one is given.

    Args:
        model: DocumentModel the defaults operate on
        entity_name: Resource name for logs
        custom_*: Optional replacements for individual operations

    Returns:
        CrudService
    """
    return CrudService(
        entity_name=entity_name,
        create=custom_create or create_create_fn(model, entity_name),
        get_by_id=custom_get_by_id or create_get_by_id_fn(model, entity_name),
        get_many=custom_get_many or create_get_many_fn(model, entity_name),
        update=custom_update or create_update_fn(model, entity_name),
        delete=custom_delete or create_delete_fn(model, entity_name),
    )
