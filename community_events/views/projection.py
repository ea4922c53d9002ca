"""Read-only projection of event state for the rendering layer.

Everything here is a pure function of its arguments; nothing mutates events.
"""

from dataclasses import dataclass, asdict
from datetime import date
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

from ..models.event import ALL_CATEGORIES, Category, Event

CATEGORY_LABELS = {
    Category.SOCIAL: 'Social',
    Category.EDUCATIONAL: 'Educational',
    Category.FITNESS: 'Fitness',
    Category.ENTERTAINMENT: 'Entertainment',
    Category.VOLUNTEER: 'Volunteer',
}

# Theme color tokens, resolved to concrete colors by the rendering layer
CATEGORY_COLORS = {
    Category.SOCIAL: 'primary',
    Category.EDUCATIONAL: 'info',
    Category.FITNESS: 'success',
    Category.ENTERTAINMENT: 'secondary',
    Category.VOLUNTEER: 'warning',
}

ALL_EVENTS_LABEL = 'All Events'

EMPTY_STATE = {
    'title': 'No events found',
    'message': 'Try selecting a different category or check back later for new events.',
}


class RegistrationState(str, Enum):
    OPEN = 'open'
    FULL = 'full'
    REGISTERED = 'registered'


BUTTON_LABELS = {
    RegistrationState.OPEN: 'Register Now',
    RegistrationState.FULL: 'Event Full',
    RegistrationState.REGISTERED: '✓ Registered',
}


@dataclass(frozen=True)
class ButtonState:
    """Presentation of the registration control for one event."""
    state: RegistrationState
    label: str
    variant: str
    interactive: bool

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data['state'] = self.state.value
        return data


def _parse_filter(selected: Union[Category, str]) -> Optional[Category]:
    """Return the category to match, or None for the 'all' sentinel."""
    if selected == ALL_CATEGORIES:
        return None
    try:
        return Category(selected)
    except ValueError:
        raise ValueError(f"Unknown category filter: {selected!r}") from None


def list_by_filter(events: Sequence[Event], selected: Union[Category, str]) -> List[Event]:
    """
    Select the events to display for a filter.

    Args:
        events: Events in display order
        selected: 'all' or a category value

    Returns:
        Matching events in their original relative order (possibly empty)

    Raises:
        ValueError: If `selected` is neither 'all' nor a known category
    """
    category = _parse_filter(selected)
    if category is None:
        return list(events)
    return [event for event in events if event.category == category]


def category_label(category: Union[Category, str]) -> str:
    return CATEGORY_LABELS[Category(category)]


def category_color(category: Union[Category, str]) -> str:
    return CATEGORY_COLORS[Category(category)]


def filter_options() -> List[Tuple[str, str]]:
    """Filter bar entries as (value, label) pairs, 'all' first."""
    options = [(ALL_CATEGORIES, ALL_EVENTS_LABEL)]
    options.extend((category.value, CATEGORY_LABELS[category]) for category in Category)
    return options


def registration_button_state(event: Event) -> ButtonState:
    """Derive the registration control state; only a full event is non-interactive."""
    if event.is_registered:
        state = RegistrationState.REGISTERED
    elif event.registered >= event.capacity:
        state = RegistrationState.FULL
    else:
        state = RegistrationState.OPEN

    return ButtonState(
        state=state,
        label=BUTTON_LABELS[state],
        variant='success' if state is RegistrationState.REGISTERED else 'primary',
        interactive=state is not RegistrationState.FULL,
    )


def format_event_date(value: date) -> str:
    """Long-form en-US date, e.g. 'Thursday, January 25, 2024'."""
    return f"{value:%A}, {value:%B} {value.day}, {value.year}"


def spots_text(event: Event) -> str:
    return f"{event.registered}/{event.capacity} registered"


def project_event(event: Event) -> Dict[str, Any]:
    """Bundle an event with all of its display metadata."""
    card = event.to_dict()
    card.update({
        'date_display': format_event_date(event.date),
        'category_label': category_label(event.category),
        'category_color': category_color(event.category),
        'spots': spots_text(event),
        'button': registration_button_state(event).to_dict(),
    })
    return card


def project_page(events: Sequence[Event], selected: Union[Category, str] = ALL_CATEGORIES) -> Dict[str, Any]:
    """
    Project a full listing page for the selected filter.

    `empty_state` is only set when no event matches the filter.
    """
    visible = list_by_filter(events, selected)
    return {
        'filter': selected.value if isinstance(selected, Category) else selected,
        'events': [project_event(event) for event in visible],
        'empty_state': None if visible else dict(EMPTY_STATE),
    }
