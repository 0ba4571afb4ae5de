"""Construction of the sandboxed jinja2 environment used by export renderers.

Each renderer owns the environment built here. Templates are addressed as
``@<Namespace>/<file>``, e.g. ``@Codality/export.ggsa.twig``.
"""

import datetime as dt
import logging
from pathlib import Path
from typing import Optional

from jinja2 import (
    FileSystemLoader,
    PrefixLoader,
    StrictUndefined,
    Undefined,
    select_autoescape,
)

from ggsa_export.calculators.duration_utils import format_duration, format_money
from ggsa_export.config.settings import ExportSettings
from ggsa_export.renderers.sandbox import ExportPolicy, ExportSandboxedEnvironment

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).parent / "templates"


def format_date(value: Optional[dt.datetime], fmt: str = "%Y-%m-%d") -> str:
    """Format a date or datetime, returning an empty string for None."""
    if value is None:
        return ""
    return value.strftime(fmt)


def create_export_environment(
    settings: Optional[ExportSettings] = None,
    policy: Optional[ExportPolicy] = None,
) -> ExportSandboxedEnvironment:
    """Build a sandboxed environment for export templates.

    Args:
        settings: Export settings (defaults apply when omitted)
        policy: Security policy (ExportPolicy when omitted)

    Returns:
        A new environment; nothing process-wide is modified

    Example:
        >>> env = create_export_environment()
        >>> env.get_template("@Codality/export.ggsa.twig").name
        '@Codality/export.ggsa.twig'
    """
    settings = settings or ExportSettings()
    template_dir = settings.template_dir or TEMPLATE_DIR

    loader = PrefixLoader(
        {f"@{settings.template_namespace}": FileSystemLoader(str(template_dir))},
        delimiter="/",
    )
    environment = ExportSandboxedEnvironment(
        loader=loader,
        policy=policy,
        autoescape=(
            select_autoescape(
                enabled_extensions=("html", "twig"), default_for_string=True
            )
            if settings.autoescape
            else False
        ),
        undefined=StrictUndefined if settings.strict_variables else Undefined,
        trim_blocks=True,
        lstrip_blocks=True,
    )
    environment.filters["duration"] = format_duration
    environment.filters["money"] = format_money
    environment.filters["date_format"] = format_date

    logger.debug(
        f"Created export environment for @{settings.template_namespace} "
        f"templates in {template_dir}"
    )
    return environment
