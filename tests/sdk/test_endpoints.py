"""Tests for SDK endpoint functions — paths, methods and parameters."""

import pytest
from unittest.mock import patch

from intervals_mcp.config import Settings
from intervals_mcp.sdk import activities, athlete, events, wellness, workouts
from intervals_mcp.sdk.client import IntervalsClient


@pytest.fixture
def client():
    return IntervalsClient(Settings(
        api_base_url="https://intervals.icu/api/v1",
        api_key="key",
        athlete_id="i1",
    ))


class TestAthlete:
    def test_profile(self, client):
        with patch.object(client, "make_request") as mock_req:
            mock_req.return_value = {"athlete": {"id": "i1"}}
            assert athlete.get_athlete_profile(client, "i1") == {"athlete": {"id": "i1"}}
            mock_req.assert_called_once_with("GET", "athlete/i1/profile")


class TestActivities:
    def test_list(self, client):
        with patch.object(client, "make_request") as mock_req:
            mock_req.return_value = []
            activities.list_activities(client, "i1", "2024-01-01", "2024-01-31", 30)
            mock_req.assert_called_once_with(
                "GET", "athlete/i1/activities",
                params={"oldest": "2024-01-01", "newest": "2024-01-31", "limit": 30},
            )

    def test_get_activity(self, client):
        with patch.object(client, "make_request") as mock_req:
            activities.get_activity(client, "i55")
            mock_req.assert_called_once_with("GET", "activity/i55")

    def test_get_intervals(self, client):
        with patch.object(client, "make_request") as mock_req:
            activities.get_intervals(client, "i55")
            mock_req.assert_called_once_with("GET", "activity/i55/intervals")


class TestEvents:
    def test_list(self, client):
        with patch.object(client, "make_request") as mock_req:
            events.list_events(client, "i1", oldest="2024-01-01")
            mock_req.assert_called_once_with(
                "GET", "athlete/i1/events",
                params={"oldest": "2024-01-01", "newest": None, "limit": None},
            )

    def test_show(self, client):
        with patch.object(client, "make_request") as mock_req:
            events.show_event(client, "i1", 9)
            mock_req.assert_called_once_with("GET", "athlete/i1/events/9")

    def test_create(self, client):
        with patch.object(client, "make_request") as mock_req:
            events.create_event(client, "i1", {"name": "Ride"})
            mock_req.assert_called_once_with("POST", "athlete/i1/events", json_data={"name": "Ride"})

    def test_create_multiple(self, client):
        with patch.object(client, "make_request") as mock_req:
            events.create_multiple_events(client, "i1", [{"name": "Ride"}], upsert=True)
            mock_req.assert_called_once_with(
                "POST", "athlete/i1/events/bulk",
                params={"upsert": True},
                json_data=[{"name": "Ride"}],
            )

    def test_delete(self, client):
        with patch.object(client, "make_request") as mock_req:
            events.delete_event(client, "i1", 9, others=True, not_before="2024-02-01")
            mock_req.assert_called_once_with(
                "DELETE", "athlete/i1/events/9",
                params={"others": True, "notBefore": "2024-02-01"},
            )

    def test_delete_bulk_uses_put(self, client):
        with patch.object(client, "make_request") as mock_req:
            mock_req.return_value = {"eventsDeleted": 1}
            result = events.delete_events_bulk(client, "i1", [{"id": 9}])
            assert result == {"eventsDeleted": 1}
            mock_req.assert_called_once_with(
                "PUT", "athlete/i1/events/bulk-delete", json_data=[{"id": 9}],
            )


class TestWellness:
    def test_list(self, client):
        with patch.object(client, "make_request") as mock_req:
            wellness.list_wellness_records(client, "i1", "2024-01-01", "2024-01-07")
            mock_req.assert_called_once_with(
                "GET", "athlete/i1/wellness",
                params={"oldest": "2024-01-01", "newest": "2024-01-07"},
            )


class TestWorkouts:
    def test_list(self, client):
        with patch.object(client, "make_request") as mock_req:
            workouts.list_workouts(client, "i1")
            mock_req.assert_called_once_with("GET", "athlete/i1/workouts")
