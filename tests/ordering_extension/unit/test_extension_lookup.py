"""Ordering extension lookup tests."""

from __future__ import annotations

from types import SimpleNamespace

from schema_property_order.ordering_extension import (
    ORDER_EXTENSION,
    Extensions,
    extract_extensions,
    lookup_ordering_extension,
)
from schema_property_order.schema_management import SubSchema


def test_lookup_returns_value_and_presence_flag() -> None:
    schema = SubSchema(keywords={"type": "string", "x-order": 3})

    assert lookup_ordering_extension(schema) == (3, True)


def test_lookup_reports_absent_extension() -> None:
    schema = SubSchema(keywords={"type": "string"})

    assert lookup_ordering_extension(schema) == (None, False)


def test_lookup_distinguishes_null_value_from_absence() -> None:
    schema = SubSchema(keywords={"x-order": None})

    assert lookup_ordering_extension(schema) == (None, True)


def test_extension_keys_are_case_insensitive() -> None:
    schema = SubSchema(keywords={"X-Order": "b"})

    assert lookup_ordering_extension(schema) == ("b", True)
    assert "x-ORDER" in schema.extensions


def test_extract_extensions_keeps_only_vendor_keywords() -> None:
    extensions = extract_extensions({"type": "object", "x-order": 1, "x-go-name": "Foo"})

    assert dict(extensions) == {"x-order": 1, "x-go-name": "Foo"}
    assert len(extensions) == 2


def test_lookup_accepts_plain_mapping_extensions() -> None:
    schema = SimpleNamespace(extensions={"X-ORDER": 7})

    assert lookup_ordering_extension(schema) == (7, True)


def test_extensions_lookup_method_uses_fixed_key_name() -> None:
    extensions = Extensions({ORDER_EXTENSION: "10"})

    assert extensions.lookup("x-order") == ("10", True)
    assert extensions.lookup("x-sort") == (None, False)
