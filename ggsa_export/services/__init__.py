"""Collaborator services injected into the GGSA renderer."""

from .statistic_service import (
    ActivityStatisticService,
    BudgetStatistic,
    BudgetStatisticProvider,
    ProjectStatisticService,
)

__all__ = [
    "ActivityStatisticService",
    "BudgetStatistic",
    "BudgetStatisticProvider",
    "ProjectStatisticService",
]
