"""Name/schema pairs, their tie-break ordering and JSON object rendering."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass
from functools import cmp_to_key
from typing import Any, Protocol, overload

from schema_property_order.ordering_extension import (
    classify_ordering_value,
    compare_ordering_keys,
    lookup_ordering_extension,
)

_LOGGER = logging.getLogger(__name__)


class PropertySerializationError(Exception):
    """Raised when a property schema cannot be encoded as JSON."""


class PropertySchema(Protocol):
    """Sub-schema capabilities needed for ordering and rendering."""

    @property
    def extensions(self) -> Mapping[str, Any]: ...

    def to_json_value(self) -> Any: ...


@dataclass(frozen=True)
class NamedSchema:
    """One property name with its sub-schema."""

    name: str
    schema: PropertySchema


def compare_named_schemas(left: NamedSchema, right: NamedSchema) -> int:
    """Three-way comparison following the ``x-order`` tie-break policy.

    Entries carrying ``x-order`` sort before entries without it. Two ordered
    entries compare by integer value, then by text, then by name, the tier
    being chosen for each pair independently. Unordered entries compare by name.
    """
    left_value, left_present = lookup_ordering_extension(left.schema)
    right_value, right_present = lookup_ordering_extension(right.schema)
    if left_present and right_present:
        result = compare_ordering_keys(
            classify_ordering_value(left_value), classify_ordering_value(right_value)
        )
        if result is not None:
            return result
        return _compare_names(left, right)
    if left_present:
        return -1
    if right_present:
        return 1
    return _compare_names(left, right)


def _compare_names(left: NamedSchema, right: NamedSchema) -> int:
    if left.name < right.name:
        return -1
    if left.name > right.name:
        return 1
    return 0


class NamedSchemaSequence(Sequence[NamedSchema]):
    """Immutable ordered sequence of named schemas rendered as one JSON object."""

    def __init__(self, items: Iterable[NamedSchema] = ()) -> None:
        self._items: tuple[NamedSchema, ...] = tuple(items)

    @overload
    def __getitem__(self, index: int) -> NamedSchema: ...

    @overload
    def __getitem__(self, index: slice) -> NamedSchemaSequence: ...

    def __getitem__(self, index: int | slice) -> NamedSchema | NamedSchemaSequence:
        if isinstance(index, slice):
            return NamedSchemaSequence(self._items[index])
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[NamedSchema]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NamedSchemaSequence):
            return NotImplemented
        return self._items == other._items

    def __repr__(self) -> str:
        return f"NamedSchemaSequence({list(self.names)!r})"

    @property
    def names(self) -> tuple[str, ...]:
        """Property names in sequence order."""
        return tuple(item.name for item in self._items)

    def sorted_by_ordering_extension(self) -> NamedSchemaSequence:
        """Return a new sequence stably sorted with the ``x-order`` tie-break policy."""
        return NamedSchemaSequence(sorted(self._items, key=cmp_to_key(compare_named_schemas)))

    def to_json_value(self) -> dict[str, Any]:
        """Return the decoded JSON object, members in sequence order."""
        return {item.name: item.schema.to_json_value() for item in self._items}

    def to_json(self) -> str:
        """Render the sequence as a compact JSON object keeping the sequence order.

        Raises:
          PropertySerializationError: If any property schema cannot be encoded.
        """
        members = [f"{_encode_name(item.name)}:{_encode_schema(item)}" for item in self._items]
        _LOGGER.debug("Rendered %d named schemas.", len(members))
        return "{" + ",".join(members) + "}"


def _encode_name(name: str) -> str:
    return json.dumps(name, ensure_ascii=False)


def _encode_schema(item: NamedSchema) -> str:
    try:
        return encode_json_value(item.schema.to_json_value())
    except PropertySerializationError as exc:
        raise PropertySerializationError(f"Property '{item.name}': {exc}") from exc


def encode_json_value(value: Any, *, indent: int | None = None) -> str:
    """Encode a decoded JSON tree without reordering object members."""
    separators = (",", ":") if indent is None else (",", ": ")
    try:
        return json.dumps(
            value,
            ensure_ascii=False,
            allow_nan=False,
            indent=indent,
            separators=separators,
        )
    except (TypeError, ValueError) as exc:
        raise PropertySerializationError(f"Value is not JSON encodable: {exc}") from exc
