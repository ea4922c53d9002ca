import pytest
from fastapi.testclient import TestClient

from community_events.api.app import create_application
from community_events.store import SAMPLE_EVENTS, EventStore


@pytest.fixture
def store() -> EventStore:
    return EventStore(SAMPLE_EVENTS)


@pytest.fixture
def client(store):
    with TestClient(create_application(store=store)) as test_client:
        yield test_client
