"""Error handling for CLI commands."""

import json
import sys
import traceback
from typing import Optional

import click
from jinja2 import TemplateError, TemplateNotFound, TemplateSyntaxError
from pydantic import ValidationError

from ggsa_export.cli.utils.formatters import format_error, format_warning
from ggsa_export.readers.payload_reader import PayloadReferenceError


class CLIError(Exception):
    """Base exception for CLI errors with user-friendly messages."""

    def __init__(self, message: str, recovery_hint: Optional[str] = None):
        """
        Initialize CLI error.

        Args:
            message: Error message to display
            recovery_hint: Optional hint for recovering from the error
        """
        self.message = message
        self.recovery_hint = recovery_hint
        super().__init__(message)


class ConfigurationError(CLIError):
    """Error related to configuration issues."""

    pass


class DataValidationError(CLIError):
    """Error related to the export payload."""

    pass


def _echo_with_hint(message: str, hint: Optional[str]) -> None:
    click.echo(format_error(message))
    if hint:
        click.echo(format_warning(f"Hint: {hint}"))


def handle_cli_error(error: Exception, debug: bool = False) -> int:
    """
    Report an error to the user and choose the exit code.

    Args:
        error: The exception that occurred
        debug: Whether to show the full stack trace

    Returns:
        Exit code: 1 configuration, 3 data, 4 template, 130 abort,
        255 anything else
    """
    if isinstance(error, ConfigurationError):
        _echo_with_hint(f"Configuration Error: {error.message}", error.recovery_hint)
        return 1

    elif isinstance(error, DataValidationError):
        _echo_with_hint(f"Data Validation Error: {error.message}", error.recovery_hint)
        return 3

    elif isinstance(error, (ValidationError, PayloadReferenceError, json.JSONDecodeError)):
        _echo_with_hint(
            f"Data Validation Error: {error}",
            "Check the payload file against the documented layout",
        )
        return 3

    elif isinstance(error, TemplateNotFound):
        _echo_with_hint(
            f"Template Not Found: {error.name}",
            "Check GGSA_TEMPLATE_DIR and the template namespace",
        )
        return 4

    elif isinstance(error, TemplateSyntaxError):
        _echo_with_hint(
            f"Template Syntax Error: {error.message} (line {error.lineno})", None
        )
        return 4

    elif isinstance(error, TemplateError):
        _echo_with_hint(f"Template Error: {error}", None)
        return 4

    elif isinstance(error, click.Abort):
        click.echo(format_warning("\nOperation cancelled by user"))
        return 130

    else:
        click.echo(format_error(f"Unexpected Error: {type(error).__name__}"))
        click.echo(str(error))

        if debug:
            click.echo("\nFull stack trace:")
            click.echo(traceback.format_exc())
        else:
            click.echo(format_warning("\nRun with --debug flag for full stack trace"))

        return 255


class ErrorHandler:
    """
    Context manager exiting the process with handle_cli_error's code.

    Example:
        with ErrorHandler(debug):
            ...
    """

    def __init__(self, debug: bool = False):
        self.debug = debug

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_val is not None and not isinstance(exc_val, SystemExit):
            sys.exit(handle_cli_error(exc_val, self.debug))
        return False
