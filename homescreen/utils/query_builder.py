"""Compose id lists, filters, and extra criteria into one Mongo query."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, NamedTuple

from bson import ObjectId

from homescreen.schemas.document_schema import ID_FIELD
from homescreen.utils.filtering import Filter, apply_filters
from homescreen.utils.sorting import SortOption


@dataclass(frozen=True)
class QueryOptions:
    """Input to a get-many operation. Every part is optional."""

    ids: list[str] | None = None
    filters: list[Filter] | None = None
    sort: list[SortOption] | None = None
    additional_criteria: dict[str, Any] = field(default_factory=dict)


class BuiltQuery(NamedTuple):
    query: dict[str, Any]
    sort: dict[str, int]


def build_mongo_query(options: QueryOptions | None = None) -> BuiltQuery:
    """
    Build the query document and sort map for ``options``.

    Precedence on key collisions: additional criteria > filters > id list.
    Ids that are not valid ObjectIds are matched as raw strings.
    """
    options = options or QueryOptions()
    query: dict[str, Any] = {}

    if options.ids:
        query[ID_FIELD] = {"$in": [ObjectId(i) if ObjectId.is_valid(i) else i for i in options.ids]}

    if options.filters:
        query.update(apply_filters(options.filters))

    if options.additional_criteria:
        query.update(options.additional_criteria)

    if options.sort is None:
        sort = {"createdAt": -1}
    else:
        sort = {}
        for option in options.sort:
            sort[option.field] = option.order.direction

    return BuiltQuery(query=query, sort=sort)
