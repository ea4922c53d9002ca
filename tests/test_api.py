import json
from dataclasses import replace

import pytest
from fastapi.testclient import TestClient

from community_events.api.app import create_application
from community_events.store import InvalidSeedData


def test_health_check(client):
    response = client.get("/")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["events"] == 5


def test_list_events_defaults_to_all(client):
    response = client.get("/api/events")

    assert response.status_code == 200
    body = response.json()
    assert body["filter"] == "all"
    assert [card["id"] for card in body["events"]] == [1, 2, 3, 4, 5]
    assert body["empty_state"] is None


def test_list_events_by_category(client):
    response = client.get("/api/events", params={"category": "fitness"})

    assert [card["title"] for card in response.json()["events"]] == ["Senior Fitness Class"]


def test_list_events_unknown_category(client):
    response = client.get("/api/events", params={"category": "sports"})

    assert response.status_code == 400


def test_filters(client):
    response = client.get("/api/events/filters")

    assert response.status_code == 200
    assert response.json()[0] == {"value": "all", "label": "All Events"}
    assert len(response.json()) == 6


def test_get_event(client):
    response = client.get("/api/events/1")

    assert response.status_code == 200
    assert response.json()["date_display"] == "Thursday, January 25, 2024"
    assert response.json()["spots"] == "45/100 registered"


def test_get_missing_event(client):
    assert client.get("/api/events/999").status_code == 404


def test_toggle_registration(client):
    response = client.post("/api/events/2/registration")

    assert response.status_code == 200
    assert response.json()["registered"] == 17
    assert response.json()["is_registered"] is False
    assert response.json()["button"]["label"] == "Register Now"

    response = client.post("/api/events/2/registration")
    assert response.json()["registered"] == 18
    assert response.json()["is_registered"] is True


def test_toggle_missing_event(client):
    assert client.post("/api/events/999/registration").status_code == 404


def test_toggle_full_event_conflicts(client, store):
    # Other attendees took the remaining spots
    events = [replace(e, registered=e.capacity) if e.id == 3 else e for e in store.list_events()]
    store.initialize(events)

    response = client.post("/api/events/3/registration")

    assert response.status_code == 409
    assert client.get("/api/events/3").json()["registered"] == 15


def test_startup_seeds_from_file(tmp_path):
    seed = tmp_path / "events.json"
    seed.write_text(json.dumps([
        {"id": 9, "title": "Bingo", "date": "2024-03-01", "category": "social", "capacity": 40}
    ]))

    with TestClient(create_application(seed_file=str(seed))) as client:
        body = client.get("/api/events").json()

    assert [card["id"] for card in body["events"]] == [9]


def test_startup_fails_on_invalid_seed(tmp_path):
    seed = tmp_path / "events.json"
    seed.write_text(json.dumps([
        {"id": 1, "title": "A", "date": "2024-03-01", "category": "social", "capacity": 5, "registered": 6}
    ]))

    with pytest.raises(InvalidSeedData):
        with TestClient(create_application(seed_file=str(seed))):
            pass
