"""Display events and the dispatcher used to collect export columns."""

from ggsa_export.events.dispatcher import EventDispatcher, MetaColumnCollector
from ggsa_export.events.display_events import (
    EXPORT,
    ActivityMetaDisplayEvent,
    CustomerMetaDisplayEvent,
    MetaDisplayEvent,
    ProjectMetaDisplayEvent,
    TimesheetMetaDisplayEvent,
    UserPreferenceDisplayEvent,
)

__all__ = [
    "EXPORT",
    "EventDispatcher",
    "MetaColumnCollector",
    "MetaDisplayEvent",
    "TimesheetMetaDisplayEvent",
    "CustomerMetaDisplayEvent",
    "ProjectMetaDisplayEvent",
    "ActivityMetaDisplayEvent",
    "UserPreferenceDisplayEvent",
]
