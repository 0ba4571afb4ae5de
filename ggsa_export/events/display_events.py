"""Display events used to collect extra export columns and preferences.

Each event names one entity kind. Subscribers receive the event, inspect the
query and location, and append the fields they want shown.
"""

from typing import List, Optional

from ggsa_export.models.meta import MetaField, UserPreference
from ggsa_export.models.query import BaseQuery, CustomerQuery, TimesheetQuery

EXPORT = "export"


class MetaDisplayEvent:
    """Base class for meta-field display events.

    Attributes:
        query: Query the export was built from
        location: Where the fields are displayed (e.g. ``"export"``)
    """

    EXPORT = EXPORT
    kind = "meta"

    def __init__(self, query: Optional[BaseQuery], location: str):
        self.query = query
        self.location = location
        self._fields: List[MetaField] = []

    def add_field(self, field: MetaField) -> None:
        self._fields.append(field)

    def get_fields(self) -> List[MetaField]:
        return list(self._fields)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(location={self.location!r})"


class TimesheetMetaDisplayEvent(MetaDisplayEvent):
    kind = "timesheet"

    def __init__(self, query: Optional[TimesheetQuery], location: str):
        super().__init__(query, location)


class CustomerMetaDisplayEvent(MetaDisplayEvent):
    kind = "customer"

    def __init__(self, query: Optional[CustomerQuery], location: str):
        super().__init__(query, location)


class ProjectMetaDisplayEvent(MetaDisplayEvent):
    kind = "project"


class ActivityMetaDisplayEvent(MetaDisplayEvent):
    kind = "activity"


class UserPreferenceDisplayEvent:
    """Collects user preferences to show for a location."""

    EXPORT = EXPORT

    def __init__(self, location: str):
        self.location = location
        self._preferences: List[UserPreference] = []

    def add_preference(self, preference: UserPreference) -> None:
        self._preferences.append(preference)

    def get_preferences(self) -> List[UserPreference]:
        return list(self._preferences)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(location={self.location!r})"
