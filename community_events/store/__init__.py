"""Event store package initialization.

This module exposes the public interface of the store package.
"""

from .errors import (
    EventStoreError,
    InvalidSeedData,
    NotFound,
    CapacityExceeded,
)
from .event_store import EventStore, ToggleResult, validate_seed
from .seed import SAMPLE_EVENTS, load_seed, load_seed_file

__all__ = [
    # Core store classes
    'EventStore',
    'ToggleResult',
    'validate_seed',

    # Exceptions
    'EventStoreError',
    'InvalidSeedData',
    'NotFound',
    'CapacityExceeded',

    # Seeding
    'SAMPLE_EVENTS',
    'load_seed',
    'load_seed_file',
]
