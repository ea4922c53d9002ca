"""In-memory event store.

The store is the single authority over event state. Reads return immutable
Event snapshots; the only mutation is the per-viewer registration toggle,
which is applied as one read-modify-write under the store lock.
"""

import logging
import threading
from dataclasses import dataclass, replace
from datetime import date
from typing import Dict, Iterable, List, Optional, Union

from ..models.event import Category, Event
from ..views.projection import list_by_filter
from .errors import CapacityExceeded, EventStoreError, InvalidSeedData, NotFound

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ToggleResult:
    """Outcome of a registration toggle: the updated event or the error."""
    event: Optional[Event] = None
    error: Optional[EventStoreError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Event:
        """Return the updated event, raising the carried error if there is one."""
        if self.error is not None:
            raise self.error
        return self.event


def validate_seed(events: Iterable[Event]) -> List[Event]:
    """
    Check a seed collection against the store invariants.

    Returns:
        The events as a list, in their original order

    Raises:
        InvalidSeedData: On the first event that breaks an invariant
    """
    seen = set()
    checked = []
    for event in events:
        for name in ('id', 'capacity', 'registered'):
            value = getattr(event, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidSeedData(f"Event {event.id} has non-integer {name} {value!r}")
        if not isinstance(event.category, Category):
            raise InvalidSeedData(f"Event {event.id} has unknown category {event.category!r}")
        if not isinstance(event.date, date):
            raise InvalidSeedData(f"Event {event.id} has invalid date {event.date!r}")
        if event.id in seen:
            raise InvalidSeedData(f"Duplicate event id {event.id}")
        if event.capacity <= 0:
            raise InvalidSeedData(
                f"Event {event.id} has non-positive capacity {event.capacity}"
            )
        if not 0 <= event.registered <= event.capacity:
            raise InvalidSeedData(
                f"Event {event.id} has {event.registered} registered "
                f"outside 0..{event.capacity}"
            )
        if event.is_registered and event.registered == 0:
            raise InvalidSeedData(
                f"Event {event.id} is marked registered but has no attendees"
            )
        seen.add(event.id)
        checked.append(event)
    return checked


class EventStore:
    """Ordered collection of events with a capacity-checked registration toggle."""

    def __init__(self, events: Optional[Iterable[Event]] = None):
        self._lock = threading.RLock()
        self._events: Dict[int, Event] = {}
        if events is not None:
            self.initialize(events)

    def initialize(self, events: Iterable[Event]) -> None:
        """
        Load the seed collection, replacing any previous one.

        Nothing is loaded if validation fails.

        Raises:
            InvalidSeedData: If any event violates the store invariants
        """
        checked = validate_seed(events)
        with self._lock:
            self._events = {event.id: event for event in checked}
        logger.info(f"Event store initialized with {len(checked)} events")

    def __len__(self) -> int:
        return len(self._events)

    def __contains__(self, event_id: int) -> bool:
        return event_id in self._events

    def list_events(self) -> List[Event]:
        """Return all events in seed order."""
        with self._lock:
            return list(self._events.values())

    def get(self, event_id: int) -> Event:
        """
        Look up a single event.

        Raises:
            NotFound: If no event has this id
        """
        with self._lock:
            try:
                return self._events[event_id]
            except KeyError:
                raise NotFound(event_id) from None

    def filter(self, category: Union[Category, str]) -> List[Event]:
        """Return the events matching a category filter (or 'all')."""
        return list_by_filter(self.list_events(), category)

    def toggle_registration(self, event_id: int) -> ToggleResult:
        """
        Flip the viewer's registration for one event.

        Registering is rejected when the event is full. Unregistering always
        succeeds, even if the capacity has dropped below the attendee count.
        Errors are reported in the result; store state is untouched on error.
        """
        with self._lock:
            event = self._events.get(event_id)
            if event is None:
                logger.warning(f"Registration toggle for unknown event {event_id}")
                return ToggleResult(error=NotFound(event_id))

            if event.is_registered:
                updated = replace(
                    event,
                    is_registered=False,
                    registered=event.registered - 1,
                )
            elif event.registered >= event.capacity:
                logger.info(
                    f"Registration for event {event_id} rejected: "
                    f"{event.registered}/{event.capacity} spots taken"
                )
                return ToggleResult(error=CapacityExceeded(event_id, event.capacity))
            else:
                updated = replace(
                    event,
                    is_registered=True,
                    registered=event.registered + 1,
                )

            self._events[event_id] = updated

        logger.debug(
            f"Event {event_id} registration toggled: registered={updated.is_registered}, "
            f"{updated.registered}/{updated.capacity}"
        )
        return ToggleResult(event=updated)
