"""Budget statistics for projects and activities.

The renderer only needs to know how much of a budget has been spent up to a
reference date. Hosts inject their own statistic services; the ones bundled
here compute the figures from a snapshot of recorded timesheets with pandas.
"""

import datetime as dt
import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, Iterable, Protocol, Sequence, Union

import pandas as pd

from ggsa_export.models.entities import Activity, Project
from ggsa_export.models.timesheet import TimesheetEntry

logger = logging.getLogger(__name__)

Budgeted = Union[Project, Activity]

COLUMNS = ["project_id", "activity_id", "begin", "duration", "rate"]


@dataclass
class BudgetStatistic:
    """What has been spent against a budget.

    Attributes:
        duration_spent: Recorded seconds
        rate_spent: Recorded billable amount
    """

    duration_spent: int = 0
    rate_spent: Decimal = Decimal("0")


class BudgetStatisticProvider(Protocol):
    """Anything able to report spent budget per project or activity."""

    def get_budget_statistics(
        self, items: Sequence[Budgeted], reference: dt.datetime
    ) -> Dict[int, BudgetStatistic]:
        ...


class _TimesheetStatisticService:
    """Computes spent budget from recorded timesheets.

    Lifetime budgets count every record that begins at or before the
    reference; monthly budgets only count records of the reference month.
    """

    id_column = ""

    def __init__(self, timesheets: Iterable[TimesheetEntry]):
        self._frame = pd.DataFrame(
            [
                {
                    "project_id": entry.project.id if entry.project else None,
                    "activity_id": entry.activity.id if entry.activity else None,
                    "begin": entry.begin,
                    "duration": entry.duration,
                    "rate": entry.rate,
                }
                for entry in timesheets
            ],
            columns=COLUMNS,
        )

    def get_budget_statistics(
        self, items: Sequence[Budgeted], reference: dt.datetime
    ) -> Dict[int, BudgetStatistic]:
        """Report spent duration and rate for each item.

        Args:
            items: Projects or activities to report on
            reference: Records after this point in time are ignored

        Returns:
            Statistics keyed by item id; items without records report zero
        """
        frame = self._frame
        if frame.empty:
            return {item.id: BudgetStatistic() for item in items}

        # Offsets differ across DST changes; naive values are read as UTC
        begins = pd.to_datetime(frame["begin"], utc=True)
        reference = pd.Timestamp(reference)
        until = _to_utc(reference)
        frame = frame[begins <= until]
        begins = begins[begins <= until]

        # The month is the one of the reference in its own zone
        month_start = _to_utc(
            reference.replace(day=1, hour=0, minute=0, second=0, microsecond=0)
        )

        statistics: Dict[int, BudgetStatistic] = {}
        for item in items:
            mask = frame[self.id_column] == item.id
            if item.is_monthly_budget():
                mask &= begins >= month_start
            rows = frame[mask]
            statistics[item.id] = BudgetStatistic(
                duration_spent=int(rows["duration"].sum()),
                rate_spent=Decimal(str(rows["rate"].sum())),
            )

        logger.debug(
            f"Computed {self.id_column} budget statistics for {len(items)} item(s) "
            f"until {until}"
        )
        return statistics


class ProjectStatisticService(_TimesheetStatisticService):
    """Budget statistics per project."""

    id_column = "project_id"


class ActivityStatisticService(_TimesheetStatisticService):
    """Budget statistics per activity."""

    id_column = "activity_id"


def _to_utc(timestamp: pd.Timestamp) -> pd.Timestamp:
    """Convert to UTC, reading naive timestamps as UTC."""
    if timestamp.tzinfo is None:
        return timestamp.tz_localize("UTC")
    return timestamp.tz_convert("UTC")
