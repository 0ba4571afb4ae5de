"""Timesheet records and the grouped rows derived from them.

This module defines TimesheetEntry, one recorded work interval, and
GroupedEntry, the display-only aggregate the GGSA export prints.
"""

import datetime as dt
from decimal import Decimal
from typing import Dict, Optional

from pydantic import Field, model_validator

from ggsa_export.models.base import BaseDataModel
from ggsa_export.models.entities import Activity, Project, User


class TimesheetEntry(BaseDataModel):
    """Represents a single recorded work interval.

    Attributes:
        id: Timesheet identifier
        begin: Start timestamp
        end: Optional end timestamp (None while running)
        duration: Duration in seconds
        description: Optional free-text description
        user: User who recorded the time
        project: Project the time was booked on
        activity: Activity the time was booked on
        rate: Billable amount for this record
        internal_rate: Internal cost amount for this record
        meta: Custom meta field values keyed by field name

    Example:
        >>> entry = TimesheetEntry(
        ...     id=1,
        ...     begin=dt.datetime(2024, 3, 4, 9, 0),
        ...     duration=3600,
        ...     description="Code review",
        ...     user=User(id=1, username="jdoe"),
        ... )
        >>> entry.begin_date
        datetime.date(2024, 3, 4)
    """

    id: int = Field(..., ge=1)
    begin: dt.datetime
    end: Optional[dt.datetime] = None
    duration: int = Field(0, ge=0, description="Duration in seconds")
    description: Optional[str] = None
    user: User
    project: Optional[Project] = None
    activity: Optional[Activity] = None
    rate: Decimal = Field(Decimal("0"), ge=0)
    internal_rate: Decimal = Field(Decimal("0"), ge=0)
    meta: Dict[str, str] = Field(default_factory=dict)

    @model_validator(mode="after")
    def validate_end_after_begin(self) -> "TimesheetEntry":
        """Reject records that end before they begin.

        Raises:
            ValueError: If end is earlier than begin
        """
        if self.end is not None and self.end < self.begin:
            raise ValueError(
                f"end ({self.end.isoformat()}) must not be before "
                f"begin ({self.begin.isoformat()})"
            )
        return self

    @property
    def begin_date(self) -> dt.date:
        """Calendar date of the start timestamp."""
        return self.begin.date()


class GroupedEntry(BaseDataModel):
    """A row of the GGSA export.

    One or more timesheet entries sharing a description on the same calendar
    day collapse into a single GroupedEntry whose duration is their sum.
    Identity, timestamp and references come from the first merged entry.
    """

    id: int
    begin: dt.datetime
    duration: int = Field(0, ge=0)
    description: Optional[str] = None
    user: User
    activity: Optional[Activity] = None
    project: Optional[Project] = None
    meta: Dict[str, str] = Field(default_factory=dict)

    @classmethod
    def from_entry(cls, entry: TimesheetEntry) -> "GroupedEntry":
        return cls(
            id=entry.id,
            begin=entry.begin,
            duration=entry.duration,
            description=entry.description,
            user=entry.user,
            activity=entry.activity,
            project=entry.project,
            meta=dict(entry.meta),
        )
