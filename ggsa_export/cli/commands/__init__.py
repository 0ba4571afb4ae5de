"""CLI commands."""

from ggsa_export.cli.commands.list import list_formats
from ggsa_export.cli.commands.render import render_export

__all__ = ["list_formats", "render_export"]
