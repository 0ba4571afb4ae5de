"""Per-project summary of the exported timesheets.

The summary is computed over the original, ungrouped entries. Each
customer/project pair gets its totals plus a breakdown by activity.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, Iterable

from ggsa_export.models.timesheet import TimesheetEntry

NONE_KEY = "none"


@dataclass
class ActivitySummary:
    """Totals for one activity within a project summary.

    Attributes:
        activity: Activity name (empty when the entries had none)
        currency: Customer currency
        duration: Summed duration in seconds
        rate: Summed billable amount
        rate_internal: Summed internal cost
    """

    activity: str
    currency: str
    duration: int = 0
    rate: Decimal = Decimal("0")
    rate_internal: Decimal = Decimal("0")


@dataclass
class ProjectSummary:
    """Totals for one customer/project pair.

    Attributes:
        customer: Customer name (empty for entries without project)
        project: Project name (empty for entries without project)
        currency: Customer currency
        duration: Summed duration in seconds
        rate: Summed billable amount
        rate_internal: Summed internal cost
        activities: Activity breakdown keyed by activity id or ``"none"``

    Example:
        >>> summary = ProjectSummary(customer="ACME", project="Web", currency="EUR")
        >>> summary.duration
        0
    """

    customer: str
    project: str
    currency: str
    duration: int = 0
    rate: Decimal = Decimal("0")
    rate_internal: Decimal = Decimal("0")
    activities: Dict[str, ActivitySummary] = field(default_factory=dict)


def calculate_summary(
    entries: Iterable[TimesheetEntry], default_currency: str = "EUR"
) -> Dict[str, ProjectSummary]:
    """Summarize entries by customer and project.

    Args:
        entries: Ungrouped timesheet entries
        default_currency: Currency used for entries without a project

    Returns:
        Summaries keyed by ``"<customer id>_<project id>"`` (``"none_none"``
        for entries without a project), ordered by customer then project name
    """
    summary: Dict[str, ProjectSummary] = {}

    for entry in entries:
        project = entry.project
        activity = entry.activity

        if project is not None:
            key = f"{project.customer.id}_{project.id}"
        else:
            key = f"{NONE_KEY}_{NONE_KEY}"

        if key not in summary:
            if project is not None:
                summary[key] = ProjectSummary(
                    customer=project.customer.name,
                    project=project.name,
                    currency=project.customer.currency,
                )
            else:
                summary[key] = ProjectSummary(
                    customer="", project="", currency=default_currency
                )
        project_summary = summary[key]

        activity_key = str(activity.id) if activity is not None else NONE_KEY
        if activity_key not in project_summary.activities:
            project_summary.activities[activity_key] = ActivitySummary(
                activity=activity.name if activity is not None else "",
                currency=project_summary.currency,
            )
        activity_summary = project_summary.activities[activity_key]

        for totals in (project_summary, activity_summary):
            totals.duration += entry.duration
            totals.rate += entry.rate
            totals.rate_internal += entry.internal_rate

    ordered = sorted(summary.items(), key=lambda item: (item[1].customer, item[1].project))
    return dict(ordered)
