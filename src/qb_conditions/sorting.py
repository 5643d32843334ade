"""Sort directives: ``{"name": "asc", "profile.age": -1}``."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any

from .composer import resolve_field_alias

if TYPE_CHECKING:
    from collections.abc import Mapping

_ASCENDING: frozenset[Any] = frozenset({"ascend", "asc", "ascending"})


class SortDirection(str, Enum):
    ASC = "ASC"
    DESC = "DESC"


def resolve_sort_direction(value: Any) -> SortDirection:
    """``ascend``, ``asc``, ``ascending`` or ``1`` sort ascending; else descending."""
    if isinstance(value, bool):
        return SortDirection.DESC
    if value == 1 or (isinstance(value, str) and value in _ASCENDING):
        return SortDirection.ASC
    return SortDirection.DESC


def parse_sort_order(
    sort: Mapping[str, Any], base_alias: str
) -> list[tuple[str, SortDirection]]:
    """Resolve each sort key to ``(field_alias, direction)`` in the given order."""
    return [
        (resolve_field_alias(field, base_alias), resolve_sort_direction(value))
        for field, value in sort.items()
    ]
