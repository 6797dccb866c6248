"""Tests for api/events.py — calendar listing, creation and deletion."""

from unittest.mock import patch

import pytest

from intervals_mcp.api.events import (
    create_bulk_events,
    create_event,
    delete_bulk_events,
    delete_event,
    get_event_details,
    get_events,
)
from intervals_mcp.model import EventInput, EventRef


def _valid_event(**overrides):
    data = {"start_date_local": "2024-07-01T09:00:00", "name": "VO2 Max", "type": "Ride"}
    data.update(overrides)
    return data


# ── Listing ──────────────────────────────────────────────────────────────

@patch("intervals_mcp.api.events.sdk_events")
def test_get_events(mock_sdk, mock_client, settings):
    mock_sdk.list_events.return_value = [
        {"id": 1, "start_date_local": "2024-07-01T00:00:00", "name": "Threshold", "workout": {"id": 9}},
        {"id": 2, "name": ""},
        {"id": 3, "start_date_local": "2024-07-06T00:00:00", "name": "Club Race", "race": True},
    ]

    result = get_events(mock_client, settings, start_date="2024-07-01", end_date="2024-07-07")

    assert result.startswith("Events:\n\n")
    assert "Date: 2024-07-01T00:00:00\nID: 1\nType: Workout\nName: Threshold" in result
    assert "Type: Race\nName: Club Race" in result
    assert "ID: 2" not in result
    mock_sdk.list_events.assert_called_once_with(
        mock_client, "i123456", oldest="2024-07-01", newest="2024-07-07", limit=30,
    )


@patch("intervals_mcp.api.events.sdk_events")
def test_get_events_none_named(mock_sdk, mock_client, settings):
    mock_sdk.list_events.return_value = [{"id": 2}]

    result = get_events(mock_client, settings)

    assert result.startswith("No named events found for athlete i123456")
    assert "include_unnamed=True" in result


@patch("intervals_mcp.api.events.sdk_events")
def test_get_events_include_unnamed(mock_sdk, mock_client, settings):
    mock_sdk.list_events.return_value = [{"id": 2}]

    result = get_events(mock_client, settings, limit=5, include_unnamed=True)

    assert "Name: Unnamed" in result
    assert mock_sdk.list_events.call_args.kwargs["limit"] == 5


@patch("intervals_mcp.api.events.sdk_events")
def test_get_event_details(mock_sdk, mock_client, settings):
    mock_sdk.show_event.return_value = {"id": 5, "date": "2024-07-01", "name": "Long Ride"}

    result = get_event_details(mock_client, settings, "5")

    assert result.startswith("Event Details:\n\nID: 5\n")
    mock_sdk.show_event.assert_called_once_with(mock_client, "i123456", 5)


@patch("intervals_mcp.api.events.sdk_events")
def test_get_event_details_not_found(mock_sdk, mock_client, settings):
    mock_sdk.show_event.return_value = None

    result = get_event_details(mock_client, settings, 5, athlete_id="i7")

    assert result == "No details found for event 5 (athlete i7)."


def test_get_event_details_non_numeric_id(mock_client, settings):
    with pytest.raises(ValueError, match="event_id must be numeric"):
        get_event_details(mock_client, settings, "abc")


# ── Creation ─────────────────────────────────────────────────────────────

@patch("intervals_mcp.api.events.sdk_events")
def test_create_event(mock_sdk, mock_client, settings):
    mock_sdk.create_event.return_value = {"id": 77, "date": "2024-07-01", "name": "VO2 Max"}

    result = create_event(mock_client, settings, _valid_event(training_load=90))

    assert result.startswith("Event Details:\n\nID: 77\n")
    body = mock_sdk.create_event.call_args[0][2]
    assert body["athlete_id"] == "i123456"
    assert body["category"] == "WORKOUT"
    assert body["target"] == "AUTO"
    assert body["icu_training_load"] == 90
    assert "training_load" not in body


@patch("intervals_mcp.api.events.sdk_events")
def test_create_event_accepts_event_input(mock_sdk, mock_client, settings):
    mock_sdk.create_event.return_value = {"id": 1}
    event = EventInput(start_date_local="2024-07-01T09:00:00", name="Easy", type="Run")

    create_event(mock_client, settings, event, athlete_id="i42")

    assert mock_sdk.create_event.call_args[0][1] == "i42"


@patch("intervals_mcp.api.events.sdk_events")
def test_create_event_failure(mock_sdk, mock_client, settings):
    mock_sdk.create_event.return_value = None

    assert create_event(mock_client, settings, _valid_event()) == "Event creation failed for athlete i123456."


@patch("intervals_mcp.api.events.sdk_events")
def test_create_event_invalid_type_makes_no_call(mock_sdk, mock_client, settings):
    with pytest.raises(ValueError, match="Invalid activity type"):
        create_event(mock_client, settings, _valid_event(type="Bike"))
    mock_sdk.create_event.assert_not_called()


@patch("intervals_mcp.api.events.sdk_events")
def test_create_bulk_events(mock_sdk, mock_client, settings):
    mock_sdk.create_multiple_events.return_value = [{"id": 1}, {"id": 2}]

    result = create_bulk_events(
        mock_client, settings, [_valid_event(), _valid_event(name="Recovery")], upsert=True,
    )

    assert result == "Successfully created 2 events for athlete i123456."
    args = mock_sdk.create_multiple_events.call_args
    assert args.kwargs["upsert"] is True
    assert [e["name"] for e in args[0][2]] == ["VO2 Max", "Recovery"]
    assert all("athlete_id" not in e for e in args[0][2])


@patch("intervals_mcp.api.events.sdk_events")
def test_create_bulk_events_failure(mock_sdk, mock_client, settings):
    mock_sdk.create_multiple_events.return_value = {"error": "nope"}

    result = create_bulk_events(mock_client, settings, [_valid_event()])

    assert result == "Bulk event creation failed for athlete i123456."


@patch("intervals_mcp.api.events.sdk_events")
def test_create_bulk_events_validates_all_first(mock_sdk, mock_client, settings):
    with pytest.raises(ValueError, match="Event 2: name is required"):
        create_bulk_events(mock_client, settings, [_valid_event(), _valid_event(name="")])
    mock_sdk.create_multiple_events.assert_not_called()


def test_create_bulk_events_empty(mock_client, settings):
    with pytest.raises(ValueError, match="At least one event"):
        create_bulk_events(mock_client, settings, [])


# ── Deletion ─────────────────────────────────────────────────────────────

@patch("intervals_mcp.api.events.sdk_events")
def test_delete_event(mock_sdk, mock_client, settings):
    mock_sdk.delete_event.return_value = {"id": 5}

    result = delete_event(mock_client, settings, 5, others=True, not_before="2024-07-01")

    assert result == "Event 5 deleted for athlete i123456."
    mock_sdk.delete_event.assert_called_once_with(
        mock_client, "i123456", 5, others=True, not_before="2024-07-01",
    )


@patch("intervals_mcp.api.events.sdk_events")
def test_delete_event_failure(mock_sdk, mock_client, settings):
    mock_sdk.delete_event.return_value = None

    result = delete_event(mock_client, settings, 5)

    assert result == "Event deletion failed for athlete i123456, event 5."


def test_delete_event_requires_id(mock_client, settings):
    with pytest.raises(ValueError, match="event_id is required"):
        delete_event(mock_client, settings, None)


@patch("intervals_mcp.api.events.sdk_events")
def test_delete_bulk_events(mock_sdk, mock_client, settings):
    mock_sdk.delete_events_bulk.return_value = {"eventsDeleted": 4}

    result = delete_bulk_events(
        mock_client, settings,
        [{"id": 1}, {"id": 2}, {"external_id": "plan-3"}, EventRef(id=4)],
    )

    assert result == "Successfully deleted 4 events for athlete i123456."
    bodies = mock_sdk.delete_events_bulk.call_args[0][2]
    assert bodies == [{"id": 1}, {"id": 2}, {"external_id": "plan-3"}, {"id": 4}]


@patch("intervals_mcp.api.events.sdk_events")
def test_delete_bulk_events_zero_is_success(mock_sdk, mock_client, settings):
    mock_sdk.delete_events_bulk.return_value = {"eventsDeleted": 0}

    result = delete_bulk_events(mock_client, settings, [{"id": 1}])

    assert result == "Successfully deleted 0 events for athlete i123456."


@patch("intervals_mcp.api.events.sdk_events")
def test_delete_bulk_events_missing_count(mock_sdk, mock_client, settings):
    mock_sdk.delete_events_bulk.return_value = {}

    result = delete_bulk_events(mock_client, settings, [{"id": 1}])

    assert result == "Bulk event deletion failed for athlete i123456."


@patch("intervals_mcp.api.events.sdk_events")
def test_delete_bulk_events_bad_ref_makes_no_call(mock_sdk, mock_client, settings):
    with pytest.raises(ValueError, match="id or an external_id"):
        delete_bulk_events(mock_client, settings, [{"id": 1}, {}])
    mock_sdk.delete_events_bulk.assert_not_called()
