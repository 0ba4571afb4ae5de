"""Render export command."""

import datetime as dt
from pathlib import Path
from typing import List, Optional

import click
from pydantic import ValidationError

from ggsa_export.cli.error_handlers import (
    ConfigurationError,
    DataValidationError,
    ErrorHandler,
)
from ggsa_export.cli.utils.formatters import format_info, format_success
from ggsa_export.config.settings import get_config
from ggsa_export.models.query import TimesheetQuery
from ggsa_export.models.timesheet import TimesheetEntry
from ggsa_export.readers.payload_reader import PayloadReferenceError, read_payload
from ggsa_export.renderers.factory import create_registry


def parse_date_input(date_str: str) -> dt.date:
    """Parse a YYYY-MM-DD date.

    Raises:
        click.BadParameter: If the format is invalid
    """
    try:
        return dt.datetime.strptime(date_str, "%Y-%m-%d").date()
    except ValueError:
        raise click.BadParameter(f"Invalid date: {date_str}. Expected YYYY-MM-DD")


def filter_entries(
    entries: List[TimesheetEntry],
    begin: Optional[dt.date],
    end: Optional[dt.date],
) -> List[TimesheetEntry]:
    """Keep entries whose start day, in their own zone, falls inside [begin, end]."""
    return [
        entry
        for entry in entries
        if (begin is None or entry.begin_date >= begin)
        and (end is None or entry.begin_date <= end)
    ]


def payload_timezone(entries: List[TimesheetEntry]) -> Optional[dt.tzinfo]:
    """Zone of the first offset-aware entry, None for naive payloads."""
    for entry in entries:
        if entry.begin.tzinfo is not None:
            return entry.begin.tzinfo
    return None


@click.command(name="render")
@click.argument(
    "payload", type=click.Path(exists=True, dir_okay=False, path_type=Path)
)
@click.option(
    "--output",
    "-o",
    required=True,
    type=click.Path(dir_okay=False, writable=True, path_type=Path),
    help="File the rendered HTML is written to",
)
@click.option(
    "--format",
    "format_id",
    default="ggsa",
    show_default=True,
    help="Export format id",
)
@click.option("--current-user", type=int, default=None, help="Id of the exporting user")
@click.option("--user", type=int, default=None, help="Id of the filtered user")
@click.option("--begin", type=str, default=None, help="First day (YYYY-MM-DD)")
@click.option("--end", type=str, default=None, help="Last day (YYYY-MM-DD)")
@click.option("--debug", is_flag=True, help="Show full stack traces on errors")
def render_export(
    payload: Path,
    output: Path,
    format_id: str,
    current_user: Optional[int],
    user: Optional[int],
    begin: Optional[str],
    end: Optional[str],
    debug: bool,
):
    """Render an export from a JSON payload.

    Example:
        ggsa-export render payload.json -o export.html
        ggsa-export render payload.json -o export.html --current-user 1 \\
            --begin 2024-03-01 --end 2024-03-31
    """
    begin_day = parse_date_input(begin) if begin else None
    end_day = parse_date_input(end) if end else None
    if begin_day and end_day and begin_day > end_day:
        raise click.BadParameter("--begin must be before or equal to --end")

    with ErrorHandler(debug):
        try:
            settings = get_config()
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid settings: {e}", recovery_hint="Check your .env file"
            )

        click.echo(format_info(f"Reading payload {payload}..."))
        dataset = read_payload(payload)

        registry = create_registry(dataset.entries, settings)
        renderer = registry.get(format_id)
        if renderer is None:
            available = ", ".join(r.id for r in registry.list())
            raise ConfigurationError(
                f"Unknown export format '{format_id}'",
                recovery_hint=f"Available formats: {available}",
            )

        try:
            current_user_ref = dataset.find_user(current_user)
            user_ref = dataset.find_user(user)
        except PayloadReferenceError as e:
            raise DataValidationError(
                str(e), recovery_hint="Pass a user id listed in the payload"
            )

        # Period bounds carry the payload's zone
        tz = payload_timezone(dataset.entries)
        query = TimesheetQuery(
            current_user=current_user_ref,
            user=user_ref,
            begin=(
                dt.datetime.combine(begin_day, dt.time.min, tzinfo=tz)
                if begin_day
                else None
            ),
            end=(
                dt.datetime.combine(end_day, dt.time.max, tzinfo=tz)
                if end_day
                else None
            ),
        )
        entries = filter_entries(dataset.entries, begin_day, end_day)

        response = renderer.render(entries, query)
        output.write_text(response.content, encoding="utf-8")

        click.echo(
            format_success(
                f"Rendered {renderer.name} export of {len(entries)} entries to {output}"
            )
        )
