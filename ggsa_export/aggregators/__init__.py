"""Aggregators that reshape timesheet entries into export rows."""

from ggsa_export.aggregators.timesheet_grouper import (
    TimesheetGrouper,
    group_timesheets,
)

__all__ = [
    "TimesheetGrouper",
    "group_timesheets",
]
