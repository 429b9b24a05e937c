"""Sort extraction from ``_sort`` / ``_order`` query parameters."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from homescreen.utils.filtering import RawQuery

SORT_PARAM = "_sort"
ORDER_PARAM = "_order"


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"

    @property
    def direction(self) -> int:
        return 1 if self is SortOrder.ASC else -1


@dataclass(frozen=True)
class SortOption:
    field: str
    order: SortOrder


def default_sort() -> list[SortOption]:
    """Newest first."""
    return [SortOption("createdAt", SortOrder.DESC)]


def get_sort_options(query: RawQuery) -> list[SortOption]:
    """
    Pair ``_sort`` fields with ``_order`` directions.

    A field without a matching direction sorts ascending. Without both
    parameters the result is the default sort.
    """
    sort_param = query.get(SORT_PARAM)
    order_param = query.get(ORDER_PARAM)
    if not sort_param or not order_param:
        return default_sort()

    fields = sort_param if isinstance(sort_param, list) else [sort_param]
    orders = order_param if isinstance(order_param, list) else [order_param]

    options = [
        SortOption(field, _parse_order(orders[i] if i < len(orders) else None))
        for i, field in enumerate(fields)
    ]
    return options or default_sort()


def _parse_order(order: str | None) -> SortOrder:
    if not order:
        return SortOrder.ASC
    # Only the exact lowercase "asc" sorts ascending.
    return SortOrder.ASC if order == SortOrder.ASC.value else SortOrder.DESC
