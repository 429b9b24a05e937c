"""
Form schemas and their persistence counterparts.

Each resource's form schema is converted exactly once, here, at import.
"""

from homescreen.schemas.converter import json_schema_to_document_schema
from homescreen.schemas.document_schema import DocumentSchema, DocumentValidationError
from homescreen.schemas.movie import movie_json_schema
from homescreen.schemas.screen_configuration import screen_configuration_json_schema
from homescreen.schemas.section import section_json_schema

movie_document_schema: DocumentSchema = json_schema_to_document_schema(movie_json_schema)
section_document_schema: DocumentSchema = json_schema_to_document_schema(section_json_schema)
screen_configuration_document_schema: DocumentSchema = json_schema_to_document_schema(
    screen_configuration_json_schema
)

__all__ = [
    "DocumentSchema",
    "DocumentValidationError",
    "json_schema_to_document_schema",
    "movie_json_schema",
    "section_json_schema",
    "screen_configuration_json_schema",
    "movie_document_schema",
    "section_document_schema",
    "screen_configuration_document_schema",
]
