"""Bind every resource's DocumentModel and services to one connection."""

from __future__ import annotations

from dataclasses import dataclass

from homescreen.db import MongoConnection
from homescreen.repos.document_model import DocumentModel
from homescreen.schemas import (
    movie_document_schema,
    screen_configuration_document_schema,
    section_document_schema,
)
from homescreen.schemas.document_schema import DocumentSchema, FieldDefinition, FieldType

# Singleton pointer to the active screen configuration. There should only
# ever be one document in this collection. Only updatedAt is tracked, since
# the document is always written through an upsert.
active_config_document_schema = DocumentSchema(
    fields={
        "screenConfigId": FieldDefinition(type=FieldType.OBJECT_ID, required=True, ref="ScreenConfiguration"),
    },
    timestamps=True,
)


@dataclass(frozen=True)
class DocumentModels:
    movie: DocumentModel
    section: DocumentModel
    screen_configuration: DocumentModel
    active_config: DocumentModel


def build_document_models(connection: MongoConnection) -> DocumentModels:
    return DocumentModels(
        movie=DocumentModel("Movie", movie_document_schema, connection),
        section=DocumentModel("Section", section_document_schema, connection),
        screen_configuration=DocumentModel(
            "ScreenConfiguration", screen_configuration_document_schema, connection
        ),
        active_config=DocumentModel(
            "ActiveConfig", active_config_document_schema, connection, collection_name="activeConfig"
        ),
    )
