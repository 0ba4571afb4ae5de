"""Data models for the GGSA export.

This package contains Pydantic models for everything the renderer reads:
- BaseDataModel: Base class with common configuration
- User, Customer, Project, Activity: Host-owned entities
- TimesheetEntry: One recorded work interval
- GroupedEntry: Display row aggregated from timesheet entries
- MetaField, UserPreference: Subscriber-contributed display data
- BaseQuery, TimesheetQuery, CustomerQuery: Export filter criteria
"""

from ggsa_export.models.base import BaseDataModel
from ggsa_export.models.entities import Activity, Customer, Project, User
from ggsa_export.models.meta import MetaField, UserPreference
from ggsa_export.models.query import BaseQuery, CustomerQuery, TimesheetQuery
from ggsa_export.models.timesheet import GroupedEntry, TimesheetEntry

__all__ = [
    "BaseDataModel",
    "User",
    "Customer",
    "Project",
    "Activity",
    "TimesheetEntry",
    "GroupedEntry",
    "MetaField",
    "UserPreference",
    "BaseQuery",
    "TimesheetQuery",
    "CustomerQuery",
]
