"""Property ordering exports."""

from .named_schemas import (
    NamedSchema,
    NamedSchemaSequence,
    PropertySchema,
    PropertySerializationError,
    compare_named_schemas,
    encode_json_value,
)
from .schema_properties import SchemaProperties

__all__ = [
    "NamedSchema",
    "NamedSchemaSequence",
    "PropertySchema",
    "PropertySerializationError",
    "SchemaProperties",
    "compare_named_schemas",
    "encode_json_value",
]
