"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import ConfigurationError, default_configuration, load_configuration, parse_order_mode
from .runtime_settings import Configuration, OrderMode, RenderSettings

__all__ = [
    "Configuration",
    "OrderMode",
    "RenderSettings",
    "ConfigurationError",
    "default_configuration",
    "load_configuration",
    "parse_order_mode",
    "DEFAULT_CONFIG_FILENAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
