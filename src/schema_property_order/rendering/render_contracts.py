"""Render execution entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from schema_property_order.configuration.runtime_settings import OrderMode


@dataclass(frozen=True)
class RenderRequest:
    """Input contract for rendering one schema file."""

    schema_path: str
    config_path: str | None = None
    output_path: str | None = None
    order_mode: OrderMode | None = None


@dataclass(frozen=True)
class RenderOutcome:
    """Output contract for one completed render."""

    text: str
    order_mode: OrderMode
    output_path: Path | None
