"""Models package initialization."""

from .event import Category, Event, ALL_CATEGORIES

__all__ = ['Category', 'Event', 'ALL_CATEGORIES']
