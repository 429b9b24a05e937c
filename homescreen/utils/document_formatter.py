"""Turn stored documents into API payloads."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from bson import ObjectId
from pydantic import BaseModel

from homescreen.schemas.document_schema import ID_FIELD, VERSION_FIELD

FormattedDocument = dict[str, Any]


def format_document(doc: Mapping[str, Any] | BaseModel) -> FormattedDocument:
    """
    Drop ``_id``/``__v`` and expose the identifier as a string ``id``.

    Accepts a raw stored document or a pydantic model of the same shape.
    Nested ObjectIds (references) are rendered as strings. Applying it to an
    already formatted document returns an equal document.
    """
    data = doc.model_dump(by_alias=True) if isinstance(doc, BaseModel) else dict(doc)

    data.pop(VERSION_FIELD, None)
    identifier = data.pop(ID_FIELD, None)

    formatted = {key: _stringify_ids(value) for key, value in data.items()}
    if identifier is not None:
        formatted["id"] = str(identifier)
    return formatted


def _stringify_ids(value: Any) -> Any:
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, list):
        return [_stringify_ids(v) for v in value]
    if isinstance(value, dict):
        return {k: _stringify_ids(v) for k, v in value.items()}
    return value
