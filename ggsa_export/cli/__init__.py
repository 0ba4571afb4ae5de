"""GGSA Export CLI.

This module provides a command-line interface for rendering GGSA timesheet
exports from JSON payloads and listing the available export formats.
"""

from typing import Optional

import click
from pydantic import ValidationError

from ggsa_export.cli.commands.list import list_formats
from ggsa_export.cli.commands.render import render_export
from ggsa_export.config.logging_config import LoggingConfig, configure_logging
from ggsa_export.config.settings import get_config

__version__ = "1.0.0"


def build_logging_config(log_level: Optional[str] = None) -> LoggingConfig:
    """Logging options from the settings, with ``log_level`` taking precedence.

    Invalid settings fall back to console logging so the command itself can
    report the configuration error.
    """
    try:
        config = LoggingConfig.from_settings(get_config())
    except ValidationError:
        return LoggingConfig(log_level=log_level or "WARNING")

    if log_level:
        config.log_level = log_level.upper()
    return config


@click.group(help="GGSA Export CLI - Render grouped timesheet exports")
@click.version_option(version=__version__)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Override LOG_LEVEL from the settings",
)
def cli(log_level: Optional[str]):
    """GGSA Export CLI main entry point."""
    configure_logging(build_logging_config(log_level))


# Register commands
cli.add_command(render_export)
cli.add_command(list_formats)


def main():
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
