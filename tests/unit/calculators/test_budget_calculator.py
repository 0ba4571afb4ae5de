"""Unit tests for project and activity budget calculation."""

import datetime as dt
from decimal import Decimal
from unittest.mock import MagicMock, patch

import pytest

from ggsa_export.calculators.budget_calculator import (
    calculate_activity_budget,
    calculate_project_budget,
    get_reference_date,
)
from ggsa_export.models import Project, TimesheetQuery
from ggsa_export.services.statistic_service import BudgetStatistic


@pytest.fixture
def statistic_service():
    service = MagicMock()
    service.get_budget_statistics.return_value = {}
    return service


class TestReferenceDate:
    """Test the reference date used for budget statistics."""

    def test_query_end_is_used(self):
        """Test that the end of the exported period is the reference."""
        end = dt.datetime(2024, 3, 31, 23, 59, 59)
        assert get_reference_date(TimesheetQuery(end=end)) == end

    def test_now_without_end(self):
        """Test that open-ended exports use the current time."""
        now = dt.datetime(2024, 6, 1, 12, 0)
        with patch("ggsa_export.calculators.budget_calculator.dt") as mock_dt:
            mock_dt.datetime.now.return_value = now
            assert get_reference_date(TimesheetQuery()) == now


class TestCalculateProjectBudget:
    """Test project budget summaries."""

    def test_empty_entries(self, statistic_service):
        """Test that no entries produce no budgets and no service call."""
        assert calculate_project_budget([], TimesheetQuery(), statistic_service) == {}
        statistic_service.get_budget_statistics.assert_not_called()

    def test_budget_left(self, make_entry, project, statistic_service):
        """Test that spent figures are subtracted from the budgets."""
        end = dt.datetime(2024, 3, 31)
        statistic_service.get_budget_statistics.return_value = {
            project.id: BudgetStatistic(
                duration_spent=9000, rate_spent=Decimal("212.50")
            )
        }

        budgets = calculate_project_budget(
            [make_entry(), make_entry()], TimesheetQuery(end=end), statistic_service
        )

        statistic_service.get_budget_statistics.assert_called_once_with([project], end)
        budget = budgets[project.id]
        assert budget.name == "Website"
        assert budget.time == 36000
        assert budget.time_left == 27000
        assert budget.money == Decimal("1000")
        assert budget.money_left == Decimal("787.50")
        assert budget.monthly is False

    def test_projects_without_budget_are_skipped(
        self, make_entry, customer, statistic_service
    ):
        """Test that unbudgeted projects are not reported."""
        unbudgeted = Project(id=99, name="Internal", customer=customer)

        budgets = calculate_project_budget(
            [make_entry(project=unbudgeted), make_entry(project=None)],
            TimesheetQuery(),
            statistic_service,
        )

        assert budgets == {}
        statistic_service.get_budget_statistics.assert_not_called()

    def test_missing_statistics_count_as_unspent(
        self, make_entry, project, statistic_service
    ):
        """Test that a service without figures leaves the full budget."""
        budgets = calculate_project_budget(
            [make_entry()], TimesheetQuery(), statistic_service
        )

        assert budgets[project.id].time_left == project.time_budget
        assert budgets[project.id].money_left == project.budget


class TestCalculateActivityBudget:
    """Test activity budget summaries."""

    def test_activity_budget(self, make_entry, activity, statistic_service):
        """Test that activity budgets are keyed by activity id."""
        statistic_service.get_budget_statistics.return_value = {
            activity.id: BudgetStatistic(duration_spent=3600)
        }

        budgets = calculate_activity_budget(
            [make_entry()], TimesheetQuery(), statistic_service
        )

        assert list(budgets) == [activity.id]
        assert budgets[activity.id].time_left == 3600
        assert budgets[activity.id].money == Decimal("0")
