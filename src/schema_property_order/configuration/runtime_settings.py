"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class OrderMode(str, Enum):
    """How ``properties`` maps are ordered on output."""

    INSERTION = "insertion"
    EXTENSION = "extension"


@dataclass(frozen=True)
class RenderSettings:
    """Output settings for rendering a schema document."""

    order_mode: OrderMode = OrderMode.INSERTION
    indent: int | None = None


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path | None
    render: RenderSettings
