"""Event model definition."""

from dataclasses import dataclass, asdict
from datetime import date
from enum import Enum
from typing import Any, Dict


class Category(str, Enum):
    """Closed set of event categories."""
    SOCIAL = 'social'
    EDUCATIONAL = 'educational'
    FITNESS = 'fitness'
    ENTERTAINMENT = 'entertainment'
    VOLUNTEER = 'volunteer'


# Filter sentinel that matches every category
ALL_CATEGORIES = 'all'


@dataclass(frozen=True)
class Event:
    """
    Event model representing a single community event.

    Instances are immutable; the store swaps in a new instance on every
    registration toggle.

    Fields:
        id: Unique identifier, never reassigned
        title: Event title
        description: Free text description
        date: Calendar date of the event
        time: Display range (e.g. '2:00 PM - 4:00 PM')
        location: Where the event takes place
        category: One of the Category values
        capacity: Maximum number of attendees
        registered: Current number of attendees
        is_registered: Whether the current viewer holds a reservation
    """
    id: int
    title: str
    description: str
    date: date
    time: str
    location: str
    category: Category
    capacity: int
    registered: int = 0
    is_registered: bool = False

    @property
    def is_full(self) -> bool:
        return self.registered >= self.capacity

    def to_dict(self) -> Dict[str, Any]:
        """Convert the event to a JSON friendly dictionary."""
        data = asdict(self)
        data['date'] = self.date.isoformat()
        data['category'] = self.category.value
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Event':
        """
        Build an event from a seed record.

        Accepts ISO formatted dates and both `is_registered` and the
        camelCase `isRegistered` key used by front-end seed files.
        Counts must be JSON integers and the registration flag a JSON boolean.

        Raises:
            KeyError: If a required field is missing
            ValueError: If a field has the wrong type or cannot be parsed
        """
        event_date = data['date']
        if isinstance(event_date, str):
            event_date = date.fromisoformat(event_date)

        is_registered = data.get('is_registered', data.get('isRegistered', False))
        if not isinstance(is_registered, bool):
            raise ValueError(f"isRegistered must be a boolean, got {is_registered!r}")

        return cls(
            id=_require_int('id', data['id']),
            title=data['title'],
            description=data.get('description', ''),
            date=event_date,
            time=data.get('time', ''),
            location=data.get('location', ''),
            category=Category(data['category']),
            capacity=_require_int('capacity', data['capacity']),
            registered=_require_int('registered', data.get('registered', 0)),
            is_registered=is_registered,
        )


def _require_int(name: str, value: Any) -> int:
    # bool is an int subclass; floats would be silently truncated
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    return value
