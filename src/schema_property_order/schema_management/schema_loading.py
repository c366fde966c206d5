"""Schema document loading service."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from schema_property_order.property_ordering import SchemaProperties

from .schema_models import SchemaDocument, SubSchema

_LOGGER = logging.getLogger(__name__)

SUPPORTED_FORMATS = ("json", "yaml")
_YAML_SUFFIXES = (".yaml", ".yml")


class SchemaError(Exception):
    """Raised for schema decoding or structure failures."""


def load_schema_document(
    text: str, *, source_format: str = "json", preserve_order: bool = True
) -> SchemaDocument:
    """Decode schema text and build its sub-schema tree.

    Args:
      text: Raw JSON or YAML schema text.
      source_format: ``json`` or ``yaml``.
      preserve_order: Keep declared property order; when False, every
        ``properties`` map is ordered by ``x-order`` on output.

    Raises:
      SchemaError: If the text cannot be decoded or the root is not an object.
    """
    if source_format == "json":
        try:
            root = json.loads(text)
        except json.JSONDecodeError as exc:
            raise SchemaError(f"Invalid json schema: {exc}") from exc
    elif source_format == "yaml":
        try:
            root = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise SchemaError(f"Invalid yaml schema: {exc}") from exc
    else:
        raise SchemaError(f"Unsupported schema format: {source_format}")

    return SchemaDocument(
        source_format=source_format,
        root=build_sub_schema(root, preserve_order=preserve_order),
    )


def load_schema_file(path: Path | str, *, preserve_order: bool = True) -> SchemaDocument:
    """Load a schema document from disk, choosing the format by file suffix."""
    schema_path = Path(path)
    if not schema_path.exists():
        raise SchemaError(f"Schema file not found: {schema_path}")
    source_format = "yaml" if schema_path.suffix.lower() in _YAML_SUFFIXES else "json"
    _LOGGER.debug("Loading %s schema from %s", source_format, schema_path)
    return load_schema_document(
        schema_path.read_text(encoding="utf-8"),
        source_format=source_format,
        preserve_order=preserve_order,
    )


def build_sub_schema(node: Any, *, preserve_order: bool = True, path: str = "") -> SubSchema:
    """Build a sub-schema from a decoded node, recursing into ``properties``."""
    if not isinstance(node, Mapping):
        location = path or "root"
        raise SchemaError(f"Schema node at {location} must be an object.")

    keywords = {key: value for key, value in node.items() if key != "properties"}
    raw_properties = node.get("properties")
    if not isinstance(raw_properties, Mapping):
        if "properties" in node:
            # Kept verbatim; only object-valued properties are ordered.
            keywords["properties"] = raw_properties
        return SubSchema(keywords=keywords)

    children: dict[str, SubSchema] = {}
    for name, child in raw_properties.items():
        if not isinstance(name, str):
            location = path or "root"
            raise SchemaError(f"Property name {name!r} at {location} must be a string.")
        children[name] = build_sub_schema(
            child, preserve_order=preserve_order, path=_child_path(path, name)
        )
    if preserve_order:
        properties = SchemaProperties.empty()
        for name, child in children.items():
            properties.insert(name, child)
    else:
        properties = SchemaProperties.from_mapping(children)
    return SubSchema(keywords=keywords, properties=properties)


def _child_path(prefix: str, name: str) -> str:
    return name if not prefix else f"{prefix}.{name}"
