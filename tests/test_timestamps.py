from datetime import datetime, timedelta, timezone

from circussync.core.timestamps import encode_datetime, encode_for_storage
from circussync.models.client import Client
from circussync.models.performer import Performer


def test_encode_is_fixed_width_utc() -> None:
    plus_two = timezone(timedelta(hours=2))
    value = datetime(2024, 7, 1, 14, 30, tzinfo=plus_two)

    assert encode_datetime(value) == "2024-07-01T12:30:00.000000+00:00"


def test_naive_datetimes_are_treated_as_utc() -> None:
    assert encode_datetime(datetime(2024, 1, 2, 3, 4, 5)) == "2024-01-02T03:04:05.000000+00:00"


def test_encoded_strings_sort_chronologically() -> None:
    earlier = datetime(2024, 7, 1, 9, 0, 0, 5, tzinfo=timezone.utc)
    later = datetime(2024, 7, 1, 10, 0, tzinfo=timezone(timedelta(hours=-1)))

    assert encode_datetime(earlier) < encode_datetime(later)


def test_encoding_walks_nested_structures() -> None:
    when = datetime(2024, 7, 1, 12, 0, tzinfo=timezone.utc)

    encoded = encode_for_storage(
        {
            "date": when,
            "next_follow_up": {"date": when, "task": "call"},
            "availability": [{"date": when, "status": "available"}],
            "count": 3,
            "missing": None,
        }
    )

    assert encoded == {
        "date": "2024-07-01T12:00:00.000000+00:00",
        "next_follow_up": {"date": "2024-07-01T12:00:00.000000+00:00", "task": "call"},
        "availability": [{"date": "2024-07-01T12:00:00.000000+00:00", "status": "available"}],
        "count": 3,
        "missing": None,
    }


def test_round_trip_through_model_fields() -> None:
    when = datetime(2024, 7, 1, 12, 0, 0, 123456, tzinfo=timezone.utc)
    tokyo = datetime(2024, 12, 31, 23, 59, 59, tzinfo=timezone(timedelta(hours=9)))

    stored = encode_for_storage(
        {
            "id": "c1",
            "name": "Acme",
            "last_contacted": tokyo,
            "next_follow_up": {"date": when, "task": "call"},
        }
    )
    client = Client.model_validate(stored)

    assert client.last_contacted == tokyo
    assert client.last_contacted.tzinfo is not None
    assert client.next_follow_up.date == when


def test_round_trip_through_nested_lists() -> None:
    when = datetime(2024, 7, 1, tzinfo=timezone.utc)

    stored = encode_for_storage(
        {"id": "p1", "name": "Ruby", "availability": [{"date": when, "status": "unavailable"}]}
    )

    assert Performer.model_validate(stored).availability[0].date == when


def test_timestamp_like_text_stays_text() -> None:
    stored = encode_for_storage(
        {"id": "c1", "name": "Acme", "notes": "2024-07-01T10:00:00Z", "contact_person": "2024-07-01 10:00:00+02:00"}
    )

    client = Client.model_validate(stored)

    assert client.notes == "2024-07-01T10:00:00Z"
    assert client.contact_person == "2024-07-01 10:00:00+02:00"
