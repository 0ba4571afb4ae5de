"""Calculator modules for the GGSA export."""

from ggsa_export.calculators.budget_calculator import (
    BudgetSummary,
    calculate_activity_budget,
    calculate_project_budget,
    get_reference_date,
)
from ggsa_export.calculators.duration_utils import (
    format_duration,
    format_money,
    seconds_to_decimal_hours,
)
from ggsa_export.calculators.summary_calculator import (
    ActivitySummary,
    ProjectSummary,
    calculate_summary,
)

__all__ = [
    # budget_calculator
    "BudgetSummary",
    "calculate_activity_budget",
    "calculate_project_budget",
    "get_reference_date",
    # duration_utils
    "format_duration",
    "format_money",
    "seconds_to_decimal_hours",
    # summary_calculator
    "ActivitySummary",
    "ProjectSummary",
    "calculate_summary",
]
