"""Schema document rendering use case."""

from __future__ import annotations

import logging
from pathlib import Path

from schema_property_order.configuration import (
    ConfigurationError,
    OrderMode,
    RenderSettings,
    default_configuration,
    load_configuration,
)
from schema_property_order.property_ordering import (
    PropertySerializationError,
    encode_json_value,
)
from schema_property_order.schema_management import SchemaDocument, SchemaError, load_schema_file

from .render_contracts import RenderOutcome, RenderRequest

_LOGGER = logging.getLogger(__name__)


class RenderExecutionError(Exception):
    """Raised when a render use case cannot be completed."""


def render_schema_document(document: SchemaDocument, settings: RenderSettings) -> str:
    """Render a whole document, keeping every ``properties`` map in container order.

    Raises:
      PropertySerializationError: If any node cannot be encoded.
    """
    return encode_json_value(document.root.to_json_value(), indent=settings.indent)


def execute_render(request: RenderRequest) -> RenderOutcome:
    """Load configuration and schema, render, and optionally write the result."""
    try:
        configuration = (
            load_configuration(request.config_path)
            if request.config_path
            else default_configuration()
        )
    except ConfigurationError as exc:
        raise RenderExecutionError(str(exc)) from exc

    settings = configuration.render
    if request.order_mode is not None:
        settings = RenderSettings(order_mode=request.order_mode, indent=settings.indent)
    preserve_order = settings.order_mode is OrderMode.INSERTION
    _LOGGER.debug("Rendering %s with order mode %s", request.schema_path, settings.order_mode.value)

    try:
        document = load_schema_file(request.schema_path, preserve_order=preserve_order)
        text = render_schema_document(document, settings)
    except (SchemaError, PropertySerializationError) as exc:
        raise RenderExecutionError(str(exc)) from exc

    output_path = None
    if request.output_path:
        output_path = Path(request.output_path)
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(text + "\n", encoding="utf-8")
        except OSError as exc:
            raise RenderExecutionError(f"Failed to write output: {exc}") from exc
        output_path = output_path.resolve()

    return RenderOutcome(text=text, order_mode=settings.order_mode, output_path=output_path)
