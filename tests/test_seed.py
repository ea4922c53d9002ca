import json
from datetime import date

import pytest

from community_events.models import Category, Event
from community_events.store import InvalidSeedData, SAMPLE_EVENTS, load_seed, load_seed_file


def test_load_seed_defaults_to_sample_events():
    events = load_seed()

    assert events == SAMPLE_EVENTS
    assert events is not SAMPLE_EVENTS


def test_load_seed_file_accepts_camel_case_records(tmp_path):
    seed = tmp_path / "events.json"
    seed.write_text(json.dumps([
        {
            "id": 4,
            "title": "Movie Night",
            "description": "Classic films",
            "date": "2024-01-30",
            "time": "7:00 PM - 9:00 PM",
            "location": "Recreation Center",
            "category": "entertainment",
            "capacity": 80,
            "registered": 80,
            "isRegistered": False,
        }
    ]))

    (event,) = load_seed(seed)

    assert event.date == date(2024, 1, 30)
    assert event.category is Category.ENTERTAINMENT
    assert event.is_full


def test_load_seed_file_rejects_bad_json(tmp_path):
    seed = tmp_path / "events.json"
    seed.write_text("{not json")

    with pytest.raises(InvalidSeedData, match="not valid JSON"):
        load_seed_file(seed)


def test_load_seed_file_requires_a_list(tmp_path):
    seed = tmp_path / "events.json"
    seed.write_text(json.dumps({"id": 1}))

    with pytest.raises(InvalidSeedData, match="must contain a list"):
        load_seed_file(seed)


def test_load_seed_file_reports_bad_record(tmp_path):
    seed = tmp_path / "events.json"
    seed.write_text(json.dumps([{"id": 1, "title": "x", "date": "2024-01-25",
                                 "category": "gardening", "capacity": 5}]))

    with pytest.raises(InvalidSeedData, match="record #0"):
        load_seed_file(seed)


def test_event_dict_round_trip():
    event = SAMPLE_EVENTS[0]
    assert Event.from_dict(event.to_dict()) == event


def _write_seed(tmp_path, **overrides):
    record = {"id": 1, "title": "Bingo", "date": "2024-03-01", "category": "social",
              "capacity": 40, "registered": 1, "isRegistered": True}
    record.update(overrides)
    seed = tmp_path / "events.json"
    seed.write_text(json.dumps([record]))
    return seed


def test_load_seed_file_rejects_string_registration_flag(tmp_path):
    seed = _write_seed(tmp_path, isRegistered="false")

    with pytest.raises(InvalidSeedData, match="isRegistered must be a boolean"):
        load_seed_file(seed)


@pytest.mark.parametrize(
    "overrides",
    [
        {"id": 1.9},
        {"capacity": 5.7},
        {"registered": 1.0},
        {"capacity": True},
        {"id": "1"},
    ],
)
def test_load_seed_file_rejects_non_integer_counts(tmp_path, overrides):
    seed = _write_seed(tmp_path, **overrides)

    with pytest.raises(InvalidSeedData, match="must be an integer"):
        load_seed_file(seed)


def test_load_seed_file_keeps_boolean_flag(tmp_path):
    (event,) = load_seed_file(_write_seed(tmp_path, registered=0, isRegistered=False))

    assert event.is_registered is False
    assert event.registered == 0
