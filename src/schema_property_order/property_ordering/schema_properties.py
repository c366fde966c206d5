"""Ordered property container for object schemas."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from typing import Any

from .named_schemas import NamedSchema, NamedSchemaSequence, PropertySchema

_LOGGER = logging.getLogger(__name__)


class SchemaProperties:
    """Mapping of property name to sub-schema that knows how to order itself.

    ``origin`` holds the lookup map. The insertion log, when present, records
    names in the order they were first inserted and always wins over the
    ``x-order`` sort. A container built without it falls back to sorting.
    A container without ``origin`` is uninitialized and serializes as ``null``.
    """

    def __init__(self, origin: Mapping[str, PropertySchema] | None = None) -> None:
        self.origin: dict[str, PropertySchema] | None = None if origin is None else dict(origin)
        self._insertion_log: list[str] | None = None

    @classmethod
    def empty(cls) -> SchemaProperties:
        """Create an initialized container that preserves insertion order."""
        properties = cls({})
        properties._insertion_log = []
        return properties

    @classmethod
    def from_mapping(cls, origin: Mapping[str, PropertySchema]) -> SchemaProperties:
        """Create a container without insertion log, ordered by ``x-order`` on output."""
        return cls(origin)

    @property
    def is_initialized(self) -> bool:
        """Return True when the lookup map exists, even if empty."""
        return self.origin is not None

    @property
    def preserves_insertion_order(self) -> bool:
        """Return True when output follows insertion order."""
        return self._insertion_log is not None

    def insert(self, name: str, schema: PropertySchema) -> None:
        """Store ``schema`` under ``name``; re-inserting keeps the original position."""
        if self.origin is None:
            self.origin = {}
        if self._insertion_log is not None and name not in self.origin:
            self._insertion_log.append(name)
        self.origin[name] = schema

    def size(self) -> int:
        if self.origin is None:
            return 0
        return len(self.origin)

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, name: object) -> bool:
        return self.origin is not None and name in self.origin

    def __getitem__(self, name: str) -> PropertySchema:
        if self.origin is None:
            raise KeyError(name)
        return self.origin[name]

    def get(self, name: str, default: PropertySchema | None = None) -> PropertySchema | None:
        if self.origin is None:
            return default
        return self.origin.get(name, default)

    def __iter__(self) -> Iterator[str]:
        return iter(self.to_ordered_sequence().names)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SchemaProperties):
            return NotImplemented
        return self.origin == other.origin and list(self) == list(other)

    def __repr__(self) -> str:
        if self.origin is None:
            return "SchemaProperties(None)"
        return f"SchemaProperties({list(self)!r})"

    def to_ordered_sequence(self) -> NamedSchemaSequence:
        """Project the container into named schemas in output order."""
        origin = self.origin or {}
        if self._insertion_log is not None:
            return NamedSchemaSequence(
                NamedSchema(name=name, schema=origin[name]) for name in self._insertion_log
            )
        _LOGGER.debug("No insertion log; sorting %d properties by x-order.", len(origin))
        unordered = NamedSchemaSequence(
            NamedSchema(name=name, schema=schema) for name, schema in origin.items()
        )
        return unordered.sorted_by_ordering_extension()

    def to_json_value(self) -> dict[str, Any] | None:
        """Return the decoded JSON form, ``None`` for an uninitialized container."""
        if self.origin is None:
            return None
        return self.to_ordered_sequence().to_json_value()

    def serialize_as_json(self) -> str:
        """Render the properties as JSON text keeping their order.

        Raises:
          PropertySerializationError: If any property schema cannot be encoded.
        """
        if self.origin is None:
            return "null"
        return self.to_ordered_sequence().to_json()
