"""Seed data for the event store.

The built-in sample collection is used unless a JSON seed file is configured.
A seed file holds a list of event records, e.g.:

    [
        {"id": 1, "title": "...", "date": "2024-01-25", "category": "social",
         "capacity": 100, "registered": 45, "isRegistered": false, ...}
    ]
"""

import json
import logging
from datetime import date
from pathlib import Path
from typing import List, Optional, Union

from ..models.event import Category, Event
from .errors import InvalidSeedData

logger = logging.getLogger(__name__)

SAMPLE_EVENTS = [
    Event(
        id=1,
        title='Monthly Community Meeting',
        description=(
            'Join us for our monthly community meeting where we discuss upcoming '
            'events, share announcements, and connect with neighbors.'
        ),
        date=date(2024, 1, 25),
        time='2:00 PM - 4:00 PM',
        location='Clubhouse Main Hall',
        category=Category.SOCIAL,
        capacity=100,
        registered=45,
        is_registered=False,
    ),
    Event(
        id=2,
        title='Senior Fitness Class',
        description=(
            'Gentle exercise class designed for seniors. Includes chair exercises, '
            'light stretching, and balance activities.'
        ),
        date=date(2024, 1, 26),
        time='10:00 AM - 11:00 AM',
        location='Fitness Center',
        category=Category.FITNESS,
        capacity=20,
        registered=18,
        is_registered=True,
    ),
    Event(
        id=3,
        title='Computer Basics Workshop',
        description=(
            'Learn the basics of using computers and smartphones. Topics include '
            'email, internet browsing, and video calling.'
        ),
        date=date(2024, 1, 28),
        time='1:00 PM - 3:00 PM',
        location='Computer Lab',
        category=Category.EDUCATIONAL,
        capacity=15,
        registered=12,
        is_registered=False,
    ),
    Event(
        id=4,
        title='Movie Night: Classic Films',
        description=(
            'Enjoy a screening of classic movies from the golden age of cinema. '
            'Popcorn and refreshments provided.'
        ),
        date=date(2024, 1, 30),
        time='7:00 PM - 9:00 PM',
        location='Recreation Center',
        category=Category.ENTERTAINMENT,
        capacity=80,
        registered=67,
        is_registered=False,
    ),
    Event(
        id=5,
        title='Volunteer Opportunity: Food Bank',
        description=(
            'Help sort and pack food donations for local families in need. '
            'Training provided, all skill levels welcome.'
        ),
        date=date(2024, 2, 2),
        time='9:00 AM - 12:00 PM',
        location='Community Center',
        category=Category.VOLUNTEER,
        capacity=25,
        registered=8,
        is_registered=False,
    ),
]


def load_seed_file(path: Union[str, Path]) -> List[Event]:
    """
    Read event records from a JSON seed file.

    Raises:
        InvalidSeedData: If the file is not a JSON list of valid event records
        OSError: If the file cannot be read
    """
    path = Path(path)
    try:
        records = json.loads(path.read_text(encoding='utf-8'))
    except json.JSONDecodeError as e:
        raise InvalidSeedData(f"Seed file {path} is not valid JSON: {e}") from e

    if not isinstance(records, list):
        raise InvalidSeedData(f"Seed file {path} must contain a list of events")

    events = []
    for index, record in enumerate(records):
        try:
            events.append(Event.from_dict(record))
        except (KeyError, TypeError, ValueError) as e:
            raise InvalidSeedData(f"Invalid event record #{index} in {path}: {e}") from e

    logger.info(f"Loaded {len(events)} events from {path}")
    return events


def load_seed(path: Optional[Union[str, Path]] = None) -> List[Event]:
    """Return the seed events from `path`, or the sample events if no path is given."""
    if path:
        return load_seed_file(path)
    logger.info("No seed file configured, using sample events")
    return list(SAMPLE_EVENTS)
