"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from .runtime_settings import Configuration, OrderMode, RenderSettings


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def default_configuration() -> Configuration:
    """Configuration used when no file is given."""
    return Configuration(path=None, render=RenderSettings())


def load_configuration(config_path: Path | str) -> Configuration:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    render = _parse_render_section(parsed.get("render"))
    return Configuration(path=path, render=render)


def _parse_render_section(value: Any) -> RenderSettings:
    if value is None:
        return RenderSettings()
    if not isinstance(value, Mapping):
        raise ConfigurationError("Configuration section 'render' must be a mapping.")
    order_mode = parse_order_mode(value.get("order_mode", OrderMode.INSERTION.value))
    indent = _optional_non_negative_int(value.get("indent"), "render.indent")
    return RenderSettings(order_mode=order_mode, indent=indent)


def parse_order_mode(value: Any) -> OrderMode:
    """Parse an order mode name, case-insensitively."""
    if not isinstance(value, str):
        raise ConfigurationError("render.order_mode must be a string.")
    normalized = value.strip().lower()
    try:
        return OrderMode(normalized)
    except ValueError as exc:
        allowed = ", ".join(mode.value for mode in OrderMode)
        raise ConfigurationError(
            f"render.order_mode '{value}' is not supported (expected one of: {allowed})."
        ) from exc


def _optional_non_negative_int(value: Any, field_name: str) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value < 0:
        raise ConfigurationError(f"{field_name} must not be negative.")
    return value
