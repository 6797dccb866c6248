"""Tests for SDK client (HTTP transport, auth, query encoding)."""

import pytest
import requests
from unittest.mock import patch, Mock

from intervals_mcp.config import Settings
from intervals_mcp.sdk.client import IntervalsClient


@pytest.fixture
def client():
    return IntervalsClient(Settings(
        api_base_url="https://intervals.icu/api/v1/",
        api_key="secret_key",
        athlete_id="i123456",
    ))


def _response(status=200, content=b"{}", payload=None):
    response = Mock(status_code=status, content=content, text=content.decode())
    response.json = Mock(return_value=payload if payload is not None else {})
    if status >= 400:
        response.raise_for_status = Mock(side_effect=requests.HTTPError(f"{status} Error"))
    else:
        response.raise_for_status = Mock()
    return response


class TestIntervalsClientInit:
    def test_strips_trailing_slash(self, client):
        assert client.api_url == "https://intervals.icu/api/v1"

    def test_basic_auth_with_literal_username(self, client):
        auth = client._session.auth
        assert auth.username == "API_KEY"
        assert auth.password == "secret_key"

    def test_headers(self, client):
        assert client._session.headers["User-Agent"] == "intervals-icu-mcp/1.0"
        assert client._session.headers["Accept"] == "application/json"


class TestMakeRequest:
    def test_builds_url_and_returns_json(self, client):
        with patch.object(client._session, "request") as mock_request:
            mock_request.return_value = _response(payload={"id": "i1"})

            result = client.make_request("GET", "activity/i1")

            assert result == {"id": "i1"}
            args = mock_request.call_args
            assert args[0] == ("GET", "https://intervals.icu/api/v1/activity/i1")
            assert args.kwargs["params"] is None
            assert args.kwargs["json"] is None

    def test_drops_none_params(self, client):
        with patch.object(client._session, "request") as mock_request:
            mock_request.return_value = _response(payload=[])

            client.make_request("GET", "athlete/i1/events", params={"oldest": "2024-01-01", "limit": None})

            assert mock_request.call_args.kwargs["params"] == {"oldest": "2024-01-01"}

    def test_all_params_none_sends_no_query(self, client):
        with patch.object(client._session, "request") as mock_request:
            mock_request.return_value = _response()

            client.make_request("GET", "athlete/i1/events", params={"limit": None})

            assert mock_request.call_args.kwargs["params"] is None

    def test_booleans_are_lowercase(self, client):
        with patch.object(client._session, "request") as mock_request:
            mock_request.return_value = _response(payload=[])

            client.make_request("POST", "athlete/i1/events/bulk", params={"upsert": True})
            assert mock_request.call_args.kwargs["params"] == {"upsert": "true"}

            client.make_request("DELETE", "athlete/i1/events/5", params={"others": False})
            assert mock_request.call_args.kwargs["params"] == {"others": "false"}

    def test_sends_json_body(self, client):
        with patch.object(client._session, "request") as mock_request:
            mock_request.return_value = _response(payload={"id": 1})

            client.make_request("post", "athlete/i1/events", json_data={"name": "Ride"})

            args = mock_request.call_args
            assert args[0][0] == "POST"
            assert args.kwargs["json"] == {"name": "Ride"}

    def test_empty_body_returns_none(self, client):
        with patch.object(client._session, "request") as mock_request:
            mock_request.return_value = _response(content=b"")

            assert client.make_request("DELETE", "athlete/i1/events/5") is None

    def test_http_error_raised(self, client):
        with patch.object(client._session, "request") as mock_request:
            mock_request.return_value = _response(status=404, content=b"not found")

            with pytest.raises(requests.HTTPError):
                client.make_request("GET", "activity/missing")

    def test_api_key_not_logged(self, client, caplog):
        with patch.object(client._session, "request") as mock_request:
            mock_request.return_value = _response(payload={"ok": True})

            with caplog.at_level("DEBUG", logger="intervals_mcp.sdk.client"):
                client.make_request("GET", "athlete/i1/profile")

            assert "athlete/i1/profile" in caplog.text
            assert "secret_key" not in caplog.text


class TestClose:
    def test_closes_session(self, client):
        with patch.object(client._session, "close") as mock_close:
            client.close()
            mock_close.assert_called_once()
