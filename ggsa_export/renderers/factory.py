"""Wiring of the bundled export renderers."""

from typing import Iterable, Optional

from ggsa_export.config.settings import ExportSettings
from ggsa_export.events.dispatcher import EventDispatcher, MetaColumnCollector
from ggsa_export.models.timesheet import TimesheetEntry
from ggsa_export.renderers.environment import create_export_environment
from ggsa_export.renderers.html_renderer import GgsaHtmlRenderer, RendererConfig
from ggsa_export.renderers.registry import ExportRendererRegistry
from ggsa_export.services.statistic_service import (
    ActivityStatisticService,
    ProjectStatisticService,
)


def create_registry(
    recorded_timesheets: Iterable[TimesheetEntry] = (),
    settings: Optional[ExportSettings] = None,
    dispatcher: Optional[EventDispatcher] = None,
) -> ExportRendererRegistry:
    """Create a registry holding the GGSA renderer.

    Args:
        recorded_timesheets: Snapshot the budget statistics are computed from
        settings: Export settings (defaults apply when omitted)
        dispatcher: Dispatcher subscribers are registered on

    Returns:
        Registry with every bundled renderer
    """
    settings = settings or ExportSettings()
    recorded = list(recorded_timesheets)

    renderer = GgsaHtmlRenderer(
        environment=create_export_environment(settings),
        collector=MetaColumnCollector(dispatcher or EventDispatcher()),
        project_statistics=ProjectStatisticService(recorded),
        activity_statistics=ActivityStatisticService(recorded),
        config=RendererConfig(default_currency=settings.default_currency),
    )
    return ExportRendererRegistry([renderer])
