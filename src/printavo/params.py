"""Request parameter types and serialization.

Parameter bags are pydantic models or plain mappings. Fields that are unset
(None) are dropped entirely; they never go out as ``null`` or as empty query
values.
"""

from collections.abc import Mapping
from enum import Enum
from typing import Any

from pydantic import BaseModel, TypeAdapter

from printavo.errors import UrlConstructionError

ParamBag = BaseModel | Mapping[str, Any]

_jsonable = TypeAdapter(Any)


class Direction(str, Enum):
    """Sort direction for list endpoints."""

    ASCENDING = "asc"
    DESCENDING = "desc"

    def __str__(self) -> str:
        return self.value


def serialize(bag: ParamBag | None) -> dict[str, Any] | None:
    """Convert a parameter bag into JSON-compatible data without None values.

    Datetimes become ISO-8601 strings and enums their values.
    """
    if bag is None:
        return None
    if isinstance(bag, BaseModel):
        return bag.model_dump(mode="json", exclude_none=True, by_alias=True)
    return _jsonable.dump_python({key: value for key, value in bag.items() if value is not None}, mode="json")


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (dict, list)):
        raise UrlConstructionError(f"Nested value cannot be encoded as a query parameter: {value!r}")
    return str(value)


def to_query_pairs(bag: ParamBag | None) -> tuple[tuple[str, str], ...]:
    """Flatten a parameter bag into ordered query pairs.

    List values repeat the key once per element.

    Raises:
        UrlConstructionError: If a value is nested (a mapping, or a list inside a list).
    """
    data = serialize(bag) or {}
    pairs: list[tuple[str, str]] = []
    for key, value in data.items():
        values = value if isinstance(value, list) else [value]
        for item in values:
            if item is not None:
                pairs.append((key, _query_value(item)))
    return tuple(pairs)
