"""HTML renderer for the GGSA timesheet export.

The renderer groups the exported timesheets by description and day, gathers
extra columns and preferences from subscribers, computes the per-project
summary and budgets over the ungrouped entries, and renders everything with
the sandboxed export template.
"""

import logging
from typing import Any, Dict, List, Optional, Sequence

from jinja2 import Environment
from pydantic import ConfigDict, Field

from ggsa_export.aggregators.timesheet_grouper import TimesheetGrouper
from ggsa_export.calculators.budget_calculator import (
    calculate_activity_budget,
    calculate_project_budget,
)
from ggsa_export.calculators.summary_calculator import calculate_summary
from ggsa_export.events.dispatcher import MetaColumnCollector
from ggsa_export.events.display_events import (
    ActivityMetaDisplayEvent,
    CustomerMetaDisplayEvent,
    ProjectMetaDisplayEvent,
    TimesheetMetaDisplayEvent,
    UserPreferenceDisplayEvent,
)
from ggsa_export.models.base import BaseDataModel
from ggsa_export.models.query import CustomerQuery, TimesheetQuery
from ggsa_export.models.timesheet import TimesheetEntry
from ggsa_export.renderers.response import ExportResponse
from ggsa_export.services.statistic_service import BudgetStatisticProvider
from ggsa_export.utils.logging_utils import LogContext, log_function_call

logger = logging.getLogger(__name__)


class RendererConfig(BaseDataModel):
    """Identity and template of an export renderer.

    Attributes:
        id: Export format identifier used by registries
        name: Human readable format name
        template: Template identifier passed to the environment
        default_currency: Currency for entries without a project
    """

    model_config = ConfigDict(frozen=True, validate_assignment=False)

    id: str = Field("ggsa", min_length=1)
    name: str = Field("GGSA", min_length=1)
    template: str = Field("@Codality/export.ggsa.twig", min_length=1)
    default_currency: str = "EUR"


def is_decimal_export(query: TimesheetQuery) -> bool:
    """Whether durations are displayed as decimal hours.

    The current user's preference wins; the filtered user's preference is
    only consulted when no current user is set.
    """
    if query.current_user is not None:
        return query.current_user.export_decimal
    if query.user is not None:
        return query.user.export_decimal
    return False


class GgsaHtmlRenderer:
    """Renders the GGSA timesheet export.

    The renderer owns its sandboxed environment; rendering never registers
    extensions on shared state, so one renderer can serve many exports.

    Attributes:
        environment: Sandboxed jinja2 environment holding the export template
        collector: Collector for subscriber-provided columns and preferences
        project_statistics: Spent-budget service for projects
        activity_statistics: Spent-budget service for activities
        config: Immutable renderer identity and template

    Example:
        >>> renderer = GgsaHtmlRenderer(
        ...     environment=create_export_environment(),
        ...     collector=MetaColumnCollector(EventDispatcher()),
        ...     project_statistics=ProjectStatisticService(all_timesheets),
        ...     activity_statistics=ActivityStatisticService(all_timesheets),
        ... )
        >>> response = renderer.render(entries, TimesheetQuery())
        >>> response.status_code
        200
    """

    def __init__(
        self,
        environment: Environment,
        collector: MetaColumnCollector,
        project_statistics: BudgetStatisticProvider,
        activity_statistics: BudgetStatisticProvider,
        config: Optional[RendererConfig] = None,
    ):
        self.environment = environment
        self.collector = collector
        self.project_statistics = project_statistics
        self.activity_statistics = activity_statistics
        self.config = config or RendererConfig()
        self.grouper = TimesheetGrouper()

    @property
    def id(self) -> str:
        return self.config.id

    @property
    def name(self) -> str:
        return self.config.name

    @property
    def template(self) -> str:
        return self.config.template

    def get_options(self, query: TimesheetQuery) -> Dict[str, Any]:
        return {"decimal": is_decimal_export(query)}

    def build_context(
        self, entries: Sequence[TimesheetEntry], query: TimesheetQuery
    ) -> Dict[str, Any]:
        """Assemble the template context for an export.

        Args:
            entries: Timesheet entries in export order
            query: Query the entries were selected with

        Returns:
            Template variables
        """
        grouped = self.grouper.group(entries)
        customer_query = query.copy_to(CustomerQuery())

        # Subscribers see the display events before any budget is computed
        export = TimesheetMetaDisplayEvent.EXPORT
        meta_fields = {
            "timesheet_meta_fields": self.collector.collect(
                TimesheetMetaDisplayEvent(query, export)
            ),
            "customer_meta_fields": self.collector.collect(
                CustomerMetaDisplayEvent(customer_query, export)
            ),
            "project_meta_fields": self.collector.collect(
                ProjectMetaDisplayEvent(query, export)
            ),
            "activity_meta_fields": self.collector.collect(
                ActivityMetaDisplayEvent(query, export)
            ),
            "user_preferences": self.collector.collect_preferences(
                UserPreferenceDisplayEvent(UserPreferenceDisplayEvent.EXPORT)
            ),
        }

        context: Dict[str, Any] = {
            "entries": grouped,
            "query": query,
            "summaries": calculate_summary(entries, self.config.default_currency),
            "budgets": calculate_project_budget(
                entries, query, self.project_statistics
            ),
            "activity_budgets": calculate_activity_budget(
                entries, query, self.activity_statistics
            ),
            **meta_fields,
        }
        context.update(self.get_options(query))
        return context

    @log_function_call
    def render(
        self, entries: Sequence[TimesheetEntry], query: TimesheetQuery
    ) -> ExportResponse:
        """Render the export document.

        Args:
            entries: Timesheet entries in export order
            query: Query the entries were selected with

        Returns:
            ExportResponse with the rendered HTML and status 200

        Raises:
            jinja2.TemplateNotFound: If the template does not exist
            jinja2.TemplateSyntaxError: If the template cannot be parsed
            jinja2.TemplateRuntimeError: If evaluation fails, including
                sandbox SecurityError
        """
        entries: List[TimesheetEntry] = list(entries)

        with LogContext(export_id=self.id, entry_count=len(entries)):
            context = self.build_context(entries, query)
            template = self.environment.get_template(self.template)
            content = template.render(context)
            logger.info(
                f"Rendered {self.name} export with {len(context['entries'])} rows "
                f"from {len(entries)} timesheet entries"
            )

        return ExportResponse(content=content)
