"""Derive persistence schemas from declarative form schemas."""

from __future__ import annotations

from typing import Any

from homescreen.schemas.document_schema import DocumentSchema, FieldDefinition, FieldType
from homescreen.schemas.property import JsonSchema, SchemaDependency, SchemaProperty

# An array of strings under this name holds movie references.
REFERENCE_LIST_FIELD = "items"
REFERENCE_TARGET = "Movie"

_TYPE_MAP: dict[str, FieldType] = {
    "boolean": FieldType.BOOLEAN,
    "number": FieldType.NUMBER,
    "object": FieldType.OBJECT,
    "string": FieldType.STRING,
}


def json_schema_to_document_schema(json_schema: JsonSchema | dict[str, Any]) -> DocumentSchema:
    """
    Convert a form schema into the persistence schema for its collection.

    Properties declared only inside ``dependencies`` alternatives are added
    as top-level fields. Timestamp tracking is always enabled.

    Args:
        json_schema: JsonSchema model or the equivalent raw dict

    Returns:
        Immutable DocumentSchema
    """
    if not isinstance(json_schema, JsonSchema):
        json_schema = JsonSchema.model_validate(json_schema)

    definition: dict[str, FieldDefinition] = {
        name: convert_property(prop, name) for name, prop in json_schema.properties.items()
    }

    for name, prop in extract_dependency_properties(json_schema.dependencies).items():
        if name not in definition:
            definition[name] = convert_property(prop, name)

    return DocumentSchema(fields=definition, timestamps=True)


def convert_property(prop: SchemaProperty, name: str) -> FieldDefinition:
    """Map a single form property onto its storage definition."""
    if prop.type == "array":
        item_type = prop.items.type if prop.items is not None else None
        if item_type == "string" and name == REFERENCE_LIST_FIELD:
            return FieldDefinition(type=FieldType.OBJECT_ID, is_list=True, ref=REFERENCE_TARGET)
        return FieldDefinition(type=_storage_type(item_type) or FieldType.MIXED, is_list=True)

    field_type = _storage_type(prop.type)
    if field_type is None:
        return FieldDefinition()

    return FieldDefinition(
        type=field_type,
        required=isinstance(prop.required, list) and name in prop.required,
        enum=tuple(prop.enum) if prop.enum else None,
        default=prop.default,
        has_default=prop.has_default,
    )


def extract_dependency_properties(dependencies: dict[str, SchemaDependency]) -> dict[str, SchemaProperty]:
    """Collect properties from every ``oneOf`` alternative; first one wins on name clashes."""
    extracted: dict[str, SchemaProperty] = {}
    for dependency in dependencies.values():
        for alternative in dependency.one_of:
            for name, prop in alternative.properties.items():
                extracted.setdefault(name, prop)
    return extracted


def _storage_type(type_name: Any) -> FieldType | None:
    return _TYPE_MAP.get(type_name) if isinstance(type_name, str) else None
