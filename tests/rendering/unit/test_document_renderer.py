"""Document rendering use case tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from schema_property_order.configuration import OrderMode, RenderSettings
from schema_property_order.rendering import (
    RenderExecutionError,
    RenderRequest,
    execute_render,
    render_schema_document,
)
from schema_property_order.schema_management import load_schema_document

_SCHEMA = (
    '{"title":"Event","properties":{"b":{"type":"string"},'
    '"a":{"type":"string","x-order":2},"c":{"type":"string","x-order":1}}}'
)


def _write(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


def test_compact_render_keeps_declared_order() -> None:
    document = load_schema_document(_SCHEMA)

    assert render_schema_document(document, RenderSettings()) == _SCHEMA


def test_indented_render_keeps_order() -> None:
    document = load_schema_document(_SCHEMA, preserve_order=False)

    rendered = render_schema_document(document, RenderSettings(indent=2))

    assert rendered.startswith('{\n  "title": "Event",')
    assert list(json.loads(rendered)["properties"]) == ["c", "a", "b"]


def test_execute_render_uses_config_order_mode(tmp_path: Path) -> None:
    schema_path = _write(tmp_path / "schema.json", _SCHEMA)
    config_path = _write(tmp_path / "config.yaml", "render:\n  order_mode: extension\n")

    outcome = execute_render(
        RenderRequest(schema_path=str(schema_path), config_path=str(config_path))
    )

    assert outcome.order_mode is OrderMode.EXTENSION
    assert list(json.loads(outcome.text)["properties"]) == ["c", "a", "b"]
    assert outcome.output_path is None


def test_request_order_mode_overrides_config(tmp_path: Path) -> None:
    schema_path = _write(tmp_path / "schema.json", _SCHEMA)
    config_path = _write(tmp_path / "config.yaml", "render:\n  order_mode: extension\n")

    outcome = execute_render(
        RenderRequest(
            schema_path=str(schema_path),
            config_path=str(config_path),
            order_mode=OrderMode.INSERTION,
        )
    )

    assert list(json.loads(outcome.text)["properties"]) == ["b", "a", "c"]


def test_execute_render_writes_output_file(tmp_path: Path) -> None:
    schema_path = _write(tmp_path / "schema.json", _SCHEMA)
    output_path = tmp_path / "out" / "rendered.json"

    outcome = execute_render(
        RenderRequest(schema_path=str(schema_path), output_path=str(output_path))
    )

    assert outcome.output_path == output_path.resolve()
    assert output_path.read_text(encoding="utf-8") == _SCHEMA + "\n"


def test_schema_errors_are_wrapped(tmp_path: Path) -> None:
    with pytest.raises(RenderExecutionError, match="not found"):
        execute_render(RenderRequest(schema_path=str(tmp_path / "missing.json")))


def test_configuration_errors_are_wrapped(tmp_path: Path) -> None:
    schema_path = _write(tmp_path / "schema.json", _SCHEMA)

    with pytest.raises(RenderExecutionError, match="Configuration file not found"):
        execute_render(
            RenderRequest(schema_path=str(schema_path), config_path=str(tmp_path / "nope.yaml"))
        )
