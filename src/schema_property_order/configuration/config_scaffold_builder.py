"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "schema-property-order.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Render configuration template for schema-property-order.
# Every setting is optional; remove a line to keep its default.

render:
  # Choose how properties maps are ordered (insertion or extension).
  # insertion: keep the order in which properties are declared.
  # extension: sort by the x-order extension, then by property name.
  order_mode: insertion
  # Pretty-print with this many spaces; null renders compact JSON.
  indent: null
"""


def build_placeholder_configuration() -> str:
    """Build a YAML render configuration template with inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the render configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
