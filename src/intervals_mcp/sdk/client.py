"""
Intervals.icu HTTP Client.

Handles HTTP transport, API-key authentication, debug logging and error handling.
All endpoint-specific calls live in the sibling modules (athlete, activities, etc.).
"""

import logging
from typing import Any, Dict, List, Optional, Union

import requests
from requests.auth import HTTPBasicAuth

from intervals_mcp.config import Settings

logger = logging.getLogger(__name__)

USER_AGENT = "intervals-icu-mcp/1.0"
API_KEY_USERNAME = "API_KEY"
REQUEST_TIMEOUT = 30.0

JSON = Union[Dict[str, Any], List[Any], None]


class IntervalsClient:
    """
    Intervals.icu HTTP transport.

    Every request carries basic auth with the literal username "API_KEY" and the
    athlete's personal key as password. Non-2xx responses raise requests.HTTPError.
    """

    def __init__(self, settings: Settings):
        self._settings = settings
        self._api_url = settings.api_base_url.rstrip("/")
        self._session = requests.Session()
        self._session.auth = HTTPBasicAuth(API_KEY_USERNAME, settings.api_key)
        self._session.headers.update({
            "User-Agent": USER_AGENT,
            "Accept": "application/json",
        })

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def api_url(self) -> str:
        return self._api_url

    def make_request(
        self,
        method: str,
        endpoint: str,
        params: Dict = None,
        json_data: Any = None,
    ) -> JSON:
        """
        Make an authenticated API request.

        Args:
            method: HTTP method (GET/POST/PUT/DELETE)
            endpoint: API endpoint path (e.g. "athlete/i123/events")
            params: Query parameters, None values are dropped
            json_data: JSON body data

        Returns:
            Parsed JSON body, or None when the response has no body

        Raises:
            requests.HTTPError: If the API returns a non-success status code
        """
        url = f"{self._api_url}/{endpoint.lstrip('/')}"
        if params:
            params = {k: _query_value(v) for k, v in params.items() if v is not None}

        logger.debug(
            "[Request] %s %s params=%s body=%s",
            method.upper(), url, params or {}, json_data,
        )

        response = self._session.request(
            method.upper(),
            url,
            params=params or None,
            json=json_data,
            timeout=REQUEST_TIMEOUT,
        )

        try:
            response.raise_for_status()
        except requests.HTTPError:
            logger.warning(
                "[Error Response] %s %s -> %s %s",
                method.upper(), url, response.status_code, response.text,
            )
            raise

        if not response.content:
            logger.debug("[Response] %s %s (empty body)", response.status_code, url)
            return None

        data = response.json()
        logger.debug("[Response] %s %s data=%s", response.status_code, url, data)
        return data

    def close(self) -> None:
        """Release the underlying HTTP connection pool."""
        self._session.close()


def _query_value(value: Any) -> Any:
    """Intervals.icu expects lowercase booleans in query strings."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return value
