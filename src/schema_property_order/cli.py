"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys

import click

from schema_property_order.configuration import (
    DEFAULT_CONFIG_FILENAME,
    ConfigurationError,
    OrderMode,
    parse_order_mode,
    write_placeholder_configuration,
)
from schema_property_order.rendering import RenderExecutionError, RenderRequest, execute_render


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="schema-property-order")
def cli() -> None:
    """Render JSON Schema documents with deterministic property order."""


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML render configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a YAML render configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="render")
@click.option(
    "--schema",
    "schema_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the JSON or YAML schema document",
)
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Optional path to the YAML render configuration",
)
@click.option(
    "--order-mode",
    "order_mode",
    required=False,
    type=click.Choice([mode.value for mode in OrderMode], case_sensitive=False),
    help="Override the configured property order mode",
)
@click.option(
    "--output",
    "output_path",
    required=False,
    type=click.Path(path_type=str),
    help="Write the rendered JSON here instead of standard output",
)
@click.option("--verbose", is_flag=True, default=False, help="Log debug details to stderr.")
def render(
    schema_path: str,
    config_path: str | None,
    order_mode: str | None,
    output_path: str | None,
    verbose: bool,
) -> None:
    """Render a schema document with ordered properties."""
    if verbose:
        _enable_debug_logging()
    try:
        outcome = execute_render(
            RenderRequest(
                schema_path=schema_path,
                config_path=config_path,
                output_path=output_path,
                order_mode=parse_order_mode(order_mode) if order_mode else None,
            )
        )
    except (RenderExecutionError, ConfigurationError) as exc:
        raise CliError(str(exc)) from exc
    if outcome.output_path is not None:
        click.echo(str(outcome.output_path))
    else:
        click.echo(outcome.text)


_DEBUG_HANDLER_NAME = "schema_property_order.cli.debug"


def _enable_debug_logging() -> None:
    package_logger = logging.getLogger("schema_property_order")
    package_logger.setLevel(logging.DEBUG)
    if any(handler.get_name() == _DEBUG_HANDLER_NAME for handler in package_logger.handlers):
        return
    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_DEBUG_HANDLER_NAME)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    package_logger.addHandler(handler)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
