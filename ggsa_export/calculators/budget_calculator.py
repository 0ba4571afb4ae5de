"""Budget figures for the projects and activities of an export.

For every budgeted project or activity referenced by the exported entries,
the export prints the budget and what is left of it at the end of the
exported period.
"""

import datetime as dt
from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, Iterable, List, Optional

from ggsa_export.models.query import TimesheetQuery
from ggsa_export.models.timesheet import TimesheetEntry
from ggsa_export.services.statistic_service import (
    BudgetStatistic,
    BudgetStatisticProvider,
    Budgeted,
)


@dataclass
class BudgetSummary:
    """Budget and remaining budget of one project or activity.

    Attributes:
        name: Project or activity name
        time: Time budget in seconds (0 when none)
        money: Money budget (0 when none)
        time_left: Time budget minus recorded seconds
        money_left: Money budget minus recorded amount
        monthly: Whether the budget resets every month

    Example:
        >>> BudgetSummary(name="Web", time=36000, money=Decimal("1000"), time_left=7200,
        ...               money_left=Decimal("250"), monthly=False).time_left
        7200
    """

    name: str
    time: int
    money: Decimal
    time_left: int
    money_left: Decimal
    monthly: bool


def get_reference_date(query: TimesheetQuery) -> dt.datetime:
    """End of the exported period, or now for open-ended exports."""
    if query.end is not None:
        return query.end
    return dt.datetime.now()


def _budgeted_items(items: Iterable[Optional[Budgeted]]) -> List[Budgeted]:
    unique: Dict[int, Budgeted] = {}
    for item in items:
        if item is not None and item.has_any_budget() and item.id not in unique:
            unique[item.id] = item
    return list(unique.values())


def _calculate_budget(
    items: List[Budgeted],
    query: TimesheetQuery,
    service: BudgetStatisticProvider,
) -> Dict[int, BudgetSummary]:
    if not items:
        return {}

    statistics = service.get_budget_statistics(items, get_reference_date(query))

    budgets: Dict[int, BudgetSummary] = {}
    for item in items:
        statistic = statistics.get(item.id, BudgetStatistic())
        budgets[item.id] = BudgetSummary(
            name=item.name,
            time=item.time_budget,
            money=item.budget,
            time_left=item.time_budget - statistic.duration_spent,
            money_left=item.budget - statistic.rate_spent,
            monthly=item.is_monthly_budget(),
        )
    return budgets


def calculate_project_budget(
    entries: Iterable[TimesheetEntry],
    query: TimesheetQuery,
    service: BudgetStatisticProvider,
) -> Dict[int, BudgetSummary]:
    """Budgets of the projects referenced by the entries.

    Args:
        entries: Ungrouped timesheet entries
        query: Export query, its ``end`` is the reference date
        service: Statistic service reporting spent budget per project

    Returns:
        Budget summaries keyed by project id, only for budgeted projects
    """
    projects = _budgeted_items(entry.project for entry in entries)
    return _calculate_budget(projects, query, service)


def calculate_activity_budget(
    entries: Iterable[TimesheetEntry],
    query: TimesheetQuery,
    service: BudgetStatisticProvider,
) -> Dict[int, BudgetSummary]:
    """Budgets of the activities referenced by the entries.

    Same contract as calculate_project_budget, keyed by activity id.
    """
    activities = _budgeted_items(entry.activity for entry in entries)
    return _calculate_budget(activities, query, service)
