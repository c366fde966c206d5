"""Schema management exports."""

from .schema_loading import (
    SUPPORTED_FORMATS,
    SchemaError,
    build_sub_schema,
    load_schema_document,
    load_schema_file,
)
from .schema_models import SchemaDocument, SubSchema

__all__ = [
    "SUPPORTED_FORMATS",
    "SchemaDocument",
    "SchemaError",
    "SubSchema",
    "build_sub_schema",
    "load_schema_document",
    "load_schema_file",
]
