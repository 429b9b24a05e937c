"""
Declarative form schemas.

These mirror the JSON Schema documents the admin forms are rendered from.
Only the keywords the persistence layer cares about are typed; everything
else (titles, widget hints, enumNames, uniqueItems) is kept as extra data.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

class SchemaProperty(BaseModel):
    """One field of a form schema."""

    model_config = ConfigDict(extra="allow", frozen=True, populate_by_name=True)

    type: Any = None  # unrecognized types are stored untyped
    title: str | None = None
    description: str | None = None
    required: Any = None  # only a list of names marks a field required
    enum: list[Any] | None = None
    default: Any = None
    items: SchemaProperty | None = None

    @property
    def has_default(self) -> bool:
        """Distinguish an explicit ``default: null`` from no default at all."""
        return "default" in self.model_fields_set


class SchemaAlternative(BaseModel):
    """One branch of a ``oneOf`` dependency."""

    model_config = ConfigDict(extra="allow", frozen=True)

    properties: dict[str, SchemaProperty] = Field(default_factory=dict)
    required: list[str] = Field(default_factory=list)


class SchemaDependency(BaseModel):
    """Conditional sub-schemas keyed off a discriminator field."""

    model_config = ConfigDict(extra="allow", frozen=True, populate_by_name=True)

    one_of: list[SchemaAlternative] = Field(default_factory=list, alias="oneOf")


class JsonSchema(BaseModel):
    """A whole form schema for one resource type."""

    model_config = ConfigDict(extra="allow", frozen=True)

    type: str = "object"
    properties: dict[str, SchemaProperty] = Field(default_factory=dict)
    required: list[str] = Field(default_factory=list)
    dependencies: dict[str, SchemaDependency] = Field(default_factory=dict)
