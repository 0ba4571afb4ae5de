"""Event dispatcher and the meta-column collector built on top of it.

The renderer does not talk to a global event bus. A dispatcher instance is
injected, subscribers register on it for the display events they care about,
and MetaColumnCollector turns a dispatched event into its field list.
"""

import logging
from collections import defaultdict
from typing import Callable, Dict, List, TypeVar

from ggsa_export.events.display_events import (
    MetaDisplayEvent,
    UserPreferenceDisplayEvent,
)
from ggsa_export.models.meta import MetaField, UserPreference

logger = logging.getLogger(__name__)

EventT = TypeVar("EventT")
Listener = Callable[[object], None]


class EventDispatcher:
    """Synchronous publish/subscribe dispatcher keyed by event class.

    Listeners subscribed to a base class also receive events of its
    subclasses. Listeners run in subscription order, most specific class
    last, and their exceptions propagate to the caller.

    Example:
        >>> dispatcher = EventDispatcher()
        >>> dispatcher.subscribe(
        ...     TimesheetMetaDisplayEvent,
        ...     lambda event: event.add_field(MetaField(name="ref", label="Ref")),
        ... )
        >>> event = dispatcher.dispatch(TimesheetMetaDisplayEvent(None, "export"))
        >>> [f.name for f in event.get_fields()]
        ['ref']
    """

    def __init__(self):
        self._listeners: Dict[type, List[Listener]] = defaultdict(list)

    def subscribe(self, event_type: type, listener: Listener) -> None:
        """Register a listener for an event class and its subclasses."""
        self._listeners[event_type].append(listener)

    def has_listeners(self, event_type: type) -> bool:
        return any(self._listeners.get(cls) for cls in event_type.__mro__)

    def dispatch(self, event: EventT) -> EventT:
        """Hand the event to every matching listener and return it."""
        listeners = [
            listener
            for cls in reversed(type(event).__mro__)
            for listener in self._listeners.get(cls, [])
        ]
        logger.debug(f"Dispatching {event!r} to {len(listeners)} listener(s)")
        for listener in listeners:
            listener(event)
        return event


class MetaColumnCollector:
    """Collects subscriber-contributed columns and preferences.

    Attributes:
        dispatcher: Dispatcher the display events are published on
    """

    def __init__(self, dispatcher: EventDispatcher):
        self.dispatcher = dispatcher

    def collect(self, event: MetaDisplayEvent) -> List[MetaField]:
        """Publish a meta display event and return the fields it gathered.

        Returns:
            The fields added by subscribers; empty when nobody listens
        """
        if not self.dispatcher.has_listeners(type(event)):
            logger.debug(f"No listeners for {event.kind} meta fields")
            return []
        fields = self.dispatcher.dispatch(event).get_fields()
        logger.debug(f"Collected {len(fields)} {event.kind} meta field(s)")
        return fields

    def collect_preferences(
        self, event: UserPreferenceDisplayEvent
    ) -> List[UserPreference]:
        if not self.dispatcher.has_listeners(type(event)):
            return []
        preferences = self.dispatcher.dispatch(event).get_preferences()
        logger.debug(f"Collected {len(preferences)} user preference(s)")
        return preferences
