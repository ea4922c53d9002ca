"""Event store exceptions."""


class EventStoreError(Exception):
    """Base exception for event store errors."""
    pass


class InvalidSeedData(EventStoreError):
    """Raised when the seed collection violates the store invariants."""
    pass


class NotFound(EventStoreError):
    """Raised or reported when an event id does not exist in the store."""

    def __init__(self, event_id: int):
        super().__init__(f"Event {event_id} not found")
        self.event_id = event_id


class CapacityExceeded(EventStoreError):
    """Reported when registering for an event that is already full."""

    def __init__(self, event_id: int, capacity: int):
        super().__init__(f"Event {event_id} is full ({capacity} spots)")
        self.event_id = event_id
        self.capacity = capacity
