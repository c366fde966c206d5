"""Schema management entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from schema_property_order.ordering_extension import Extensions, extract_extensions
from schema_property_order.property_ordering import SchemaProperties


@dataclass(frozen=True)
class SubSchema:
    """One JSON Schema node.

    ``keywords`` holds every keyword except ``properties`` in document order,
    vendor extensions included. Keywords are carried, never interpreted.
    """

    keywords: Mapping[str, Any] = field(default_factory=dict)
    properties: SchemaProperties | None = None

    @property
    def extensions(self) -> Extensions:
        """Vendor extensions (``x-`` keywords) of this node."""
        return extract_extensions(self.keywords)

    def to_json_value(self) -> dict[str, Any]:
        """Return the decoded JSON tree with ordered nested properties."""
        value = dict(self.keywords)
        if self.properties is not None:
            value["properties"] = self.properties.to_json_value()
        return value


@dataclass(frozen=True)
class SchemaDocument:
    """Structured representation of a loaded schema document."""

    source_format: str
    root: SubSchema
