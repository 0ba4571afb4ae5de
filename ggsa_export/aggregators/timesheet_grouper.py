"""Grouping of timesheet entries into GGSA export rows.

Entries sharing a description on the same calendar day collapse into one
row whose duration is the sum of theirs. The lookup is positional: the
descriptions and begin dates of emitted rows are tracked in two lists aligned
with the output, and an entry is only compared against the *first* row
carrying its description. A description that already produced rows on two
different days therefore keeps producing new rows for the second day.
"""

import logging
from typing import Iterable, List, Optional

from ggsa_export.models.timesheet import GroupedEntry, TimesheetEntry

logger = logging.getLogger(__name__)

DATE_FORMAT = "%Y-%m-%d"


def _first_index(values: List[Optional[str]], value: str) -> Optional[int]:
    try:
        return values.index(value)
    except ValueError:
        return None


def group_timesheets(entries: Iterable[TimesheetEntry]) -> List[GroupedEntry]:
    """Group entries by description and calendar day.

    Args:
        entries: Timesheet entries in export order

    Returns:
        Grouped rows, ordered by the first occurrence of each group

    Example:
        >>> rows = group_timesheets([review_9am, review_2pm, standup])
        >>> [(r.description, r.duration) for r in rows]
        [('Code review', 5400), ('Standup', 900)]
    """
    grouped: List[GroupedEntry] = []
    descriptions: List[Optional[str]] = []
    begin_dates: List[str] = []

    for entry in entries:
        description = entry.description
        begin_date = entry.begin.strftime(DATE_FORMAT)

        if description:
            index = _first_index(descriptions, description)
            if index is not None and begin_dates[index] == begin_date:
                grouped[index].duration += entry.duration
                continue

        grouped.append(GroupedEntry.from_entry(entry))
        # Empty descriptions are tracked as None so they never match
        descriptions.append(description or None)
        begin_dates.append(begin_date)

    return grouped


class TimesheetGrouper:
    """Groups timesheet entries for the GGSA export.

    Example:
        >>> grouper = TimesheetGrouper()
        >>> rows = grouper.group(entries)
    """

    def group(self, entries: Iterable[TimesheetEntry]) -> List[GroupedEntry]:
        """Group entries, logging how many rows were merged away.

        Args:
            entries: Timesheet entries in export order

        Returns:
            Grouped rows
        """
        entries = list(entries)
        grouped = group_timesheets(entries)
        logger.debug(
            f"Grouped {len(entries)} timesheet entries into {len(grouped)} rows"
        )
        return grouped
