"""
Persistence schema descriptors.

A DocumentSchema is derived once per resource type from its form schema
(see converter.py) and is immutable afterwards. DocumentModel applies it to
every write: unknown keys are dropped, values are cast, defaults filled in,
and required/enum constraints checked.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum
from types import MappingProxyType
from typing import Any

from bson import ObjectId

ID_FIELD = "_id"
VERSION_FIELD = "__v"
CREATED_AT = "createdAt"
UPDATED_AT = "updatedAt"

_PROTECTED_KEYS = frozenset({ID_FIELD, VERSION_FIELD, "id", CREATED_AT, UPDATED_AT})

_TRUE_STRINGS = frozenset({"true", "1", "yes"})
_FALSE_STRINGS = frozenset({"false", "0", "no"})


class DocumentValidationError(ValueError):
    """A value could not be stored under the resource's persistence schema."""

    def __init__(self, model_name: str, path: str, message: str) -> None:
        self.model_name = model_name
        self.path = path
        super().__init__(f"{model_name} validation failed: {path}: {message}")


class FieldType(str, Enum):
    """Storage primitive types."""

    BOOLEAN = "Boolean"
    NUMBER = "Number"
    STRING = "String"
    OBJECT = "Object"
    OBJECT_ID = "ObjectId"
    MIXED = "Mixed"


@dataclass(frozen=True)
class FieldDefinition:
    """How one field is stored. ``type=None`` means untyped (stored as given)."""

    type: FieldType | None = None
    is_list: bool = False
    required: bool = False
    enum: tuple[Any, ...] | None = None
    default: Any = None
    has_default: bool = False
    ref: str | None = None

    @property
    def is_reference_list(self) -> bool:
        return self.is_list and self.ref is not None


@dataclass(frozen=True)
class DocumentSchema:
    """Immutable persistence schema for one resource type."""

    fields: MappingProxyType[str, FieldDefinition]
    timestamps: bool = True
    reference_paths: tuple[str, ...] = field(init=False)

    def __post_init__(self) -> None:
        if not isinstance(self.fields, MappingProxyType):
            object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))
        refs = tuple(name for name, definition in self.fields.items() if definition.is_reference_list)
        object.__setattr__(self, "reference_paths", refs)

    def prepare_insert(self, model_name: str, data: dict[str, Any]) -> dict[str, Any]:
        """
        Build the document to insert from client data.

        Args:
            model_name: Used in error messages
            data: Client payload

        Returns:
            New document (without ``_id``), timestamps and revision set

        Raises:
            DocumentValidationError: on cast, enum, or required failures
        """
        doc: dict[str, Any] = {}
        for name, definition in self.fields.items():
            if name in data:
                doc[name] = _cast_field(model_name, name, definition, data[name])
            elif definition.has_default:
                doc[name] = _copy_default(definition.default)
            elif definition.is_list:
                doc[name] = []

            _validate_field(model_name, name, definition, doc.get(name))

        if self.timestamps:
            now = datetime.now(UTC)
            doc[CREATED_AT] = now
            doc[UPDATED_AT] = now
        doc[VERSION_FIELD] = 0
        return doc

    def prepare_update(self, model_name: str, data: dict[str, Any]) -> dict[str, Any]:
        """
        Build the ``$set`` payload for a partial update.

        Unknown and bookkeeping keys are ignored. Required/enum checks are
        not re-run on partial updates.
        """
        changes: dict[str, Any] = {}
        for name, value in data.items():
            if name in _PROTECTED_KEYS:
                continue
            definition = self.fields.get(name)
            if definition is None:
                continue
            changes[name] = _cast_field(model_name, name, definition, value)

        if self.timestamps:
            changes[UPDATED_AT] = datetime.now(UTC)
        return changes


def to_object_id(value: Any) -> ObjectId | None:
    """Return the ObjectId for ``value``, or None if it is not a valid identifier."""
    if isinstance(value, ObjectId):
        return value
    if isinstance(value, str) and ObjectId.is_valid(value):
        return ObjectId(value)
    return None


def _copy_default(value: Any) -> Any:
    if isinstance(value, list):
        return list(value)
    if isinstance(value, dict):
        return dict(value)
    return value


def _validate_field(model_name: str, name: str, definition: FieldDefinition, value: Any) -> None:
    if definition.required:
        missing = value is None or value == "" or (definition.is_list and not value)
        if missing:
            raise DocumentValidationError(model_name, name, "Path is required.")

    if definition.enum is not None and value is not None and value not in definition.enum:
        raise DocumentValidationError(
            model_name,
            name,
            f"`{value}` is not a valid enum value",
        )


def _cast_field(model_name: str, name: str, definition: FieldDefinition, value: Any) -> Any:
    if value is None:
        return None

    if definition.is_list:
        values = value if isinstance(value, list) else [value]
        return [_cast_scalar(model_name, f"{name}.{i}", definition, v) for i, v in enumerate(values)]

    return _cast_scalar(model_name, name, definition, value)


def _cast_scalar(model_name: str, path: str, definition: FieldDefinition, value: Any) -> Any:
    field_type = definition.type
    if value is None or field_type in (None, FieldType.OBJECT, FieldType.MIXED):
        return value

    if field_type is FieldType.OBJECT_ID:
        # Malformed references are kept verbatim rather than rejected.
        return to_object_id(value) or value

    if field_type is FieldType.STRING:
        if isinstance(value, (dict, list)):
            raise DocumentValidationError(model_name, path, "Cast to String failed")
        if isinstance(value, bool):
            return "true" if value else "false"
        return str(value)

    if field_type is FieldType.NUMBER:
        if isinstance(value, bool):
            return int(value)
        if isinstance(value, (int, float)):
            return value
        if isinstance(value, str) and value.strip():
            try:
                number = float(value)
            except ValueError:
                raise DocumentValidationError(model_name, path, "Cast to Number failed") from None
            return int(number) if number.is_integer() else number
        raise DocumentValidationError(model_name, path, "Cast to Number failed")

    if field_type is FieldType.BOOLEAN:
        if isinstance(value, bool):
            return value
        if isinstance(value, (int, float)) and value in (0, 1):
            return bool(value)
        if isinstance(value, str) and value.lower() in _TRUE_STRINGS:
            return True
        if isinstance(value, str) and value.lower() in _FALSE_STRINGS:
            return False
        raise DocumentValidationError(model_name, path, "Cast to Boolean failed")

    return value
