"""Deterministic, order-preserving JSON rendering of schema properties."""

import logging

from .ordering_extension import ORDER_EXTENSION, Extensions, lookup_ordering_extension
from .property_ordering import (
    NamedSchema,
    NamedSchemaSequence,
    PropertySerializationError,
    SchemaProperties,
)
from .schema_management import SubSchema

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ORDER_EXTENSION",
    "Extensions",
    "NamedSchema",
    "NamedSchemaSequence",
    "PropertySerializationError",
    "SchemaProperties",
    "SubSchema",
    "lookup_ordering_extension",
]
