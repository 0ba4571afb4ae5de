"""List export formats command."""

import click
from pydantic import ValidationError

from ggsa_export.cli.error_handlers import ConfigurationError, ErrorHandler
from ggsa_export.cli.utils.formatters import format_info, format_success, format_table
from ggsa_export.config.settings import get_config
from ggsa_export.renderers.factory import create_registry


@click.command(name="list-formats")
@click.option("--debug", is_flag=True, help="Show full stack traces on errors")
def list_formats(debug: bool):
    """List the available export formats.

    Example:
        ggsa-export list-formats
    """
    with ErrorHandler(debug):
        try:
            settings = get_config()
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid settings: {e}", recovery_hint="Check your .env file"
            )

        registry = create_registry(settings=settings)
        renderers = registry.list()

        if not renderers:
            click.echo(format_info("No export formats registered."))
            return

        rows = [
            [renderer.id, renderer.name, renderer.template] for renderer in renderers
        ]
        click.echo(format_table(["Id", "Name", "Template"], rows))
        click.echo()
        click.echo(format_success(f"Found {len(renderers)} export format(s)"))
