"""Ordering extension exports."""

from .extension_lookup import (
    ORDER_EXTENSION,
    Extensions,
    SupportsExtensions,
    extract_extensions,
    lookup_ordering_extension,
)
from .ordering_keys import (
    OrderingKey,
    OrderingKeyKind,
    classify_ordering_value,
    compare_ordering_keys,
)

__all__ = [
    "ORDER_EXTENSION",
    "Extensions",
    "SupportsExtensions",
    "extract_extensions",
    "lookup_ordering_extension",
    "OrderingKey",
    "OrderingKeyKind",
    "classify_ordering_value",
    "compare_ordering_keys",
]
