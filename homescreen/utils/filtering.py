"""
Filter extraction from list query parameters.

Query parameter naming convention (what the admin UI's REST data provider sends):
- ``field_like=value``  -> case-insensitive substring match
- ``field_in=a&field_in=b`` -> membership in a set of values
- ``field=value``       -> exact match

Keys starting with ``_`` are reserved for sorting/pagination, and ``id`` is
handled by the id-list path of the query builder.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

logger = logging.getLogger(__name__)

RawQuery = Mapping[str, str | list[str] | None]

_LIKE_SUFFIX = "_like"
_IN_SUFFIX = "_in"


class FilterOperator(str, Enum):
    EQ = "eq"
    CONTAINS = "contains"
    IN = "in"


@dataclass(frozen=True)
class Filter:
    """One normalized filter. CONTAINS/EQ carry a string, IN carries a list."""

    field: str
    operator: FilterOperator
    value: str | list[str]


def get_filter_options(
    query: RawQuery,
    field_mappings: Mapping[str, str] | None = None,
) -> list[Filter]:
    """
    Extract filters from raw query parameters, preserving their order.

    Args:
        query: Query parameters; repeated keys arrive as lists
        field_mappings: Optional renames from parameter names to document fields

    Returns:
        List of Filter objects
    """
    mappings = field_mappings or {}
    filters: list[Filter] = []

    for key, value in query.items():
        if not value or key.startswith("_"):
            continue

        if key.endswith(_LIKE_SUFFIX):
            name = key[: -len(_LIKE_SUFFIX)]
            filters.append(Filter(mappings.get(name, name), FilterOperator.CONTAINS, _as_string(value)))
        elif key.endswith(_IN_SUFFIX):
            name = key[: -len(_IN_SUFFIX)]
            values = value if isinstance(value, list) else [value]
            filters.append(Filter(mappings.get(name, name), FilterOperator.IN, [v for v in values if v]))
        elif key != "id":
            filters.append(Filter(mappings.get(key, key), FilterOperator.EQ, _as_string(value)))

    logger.debug("Filters: %s", filters)
    return filters


def apply_filters(filters: list[Filter]) -> dict[str, Any]:
    """
    Translate filters into a Mongo query document.

    Later filters on the same field replace earlier ones.
    """
    query: dict[str, Any] = {}
    for f in filters:
        if f.operator is FilterOperator.EQ:
            query[f.field] = _as_string(f.value)
        elif f.operator is FilterOperator.CONTAINS:
            query[f.field] = {"$regex": _as_string(f.value), "$options": "i"}
        elif f.operator is FilterOperator.IN:
            query[f.field] = {"$in": f.value if isinstance(f.value, list) else [f.value]}
        else:
            raise ValueError(f"Unsupported filter operator: {f.operator!r}")
    return query


def _as_string(value: str | list[str]) -> str:
    # A scalar parameter repeated in the URL keeps its last value.
    if isinstance(value, list):
        return str(value[-1]) if value else ""
    return str(value)
