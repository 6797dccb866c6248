"""
Intervals.icu activities SDK functions.
"""

from typing import Any, Dict, List, Optional

from intervals_mcp.sdk.client import IntervalsClient


def list_activities(
    client: IntervalsClient,
    athlete_id: str,
    oldest: str,
    newest: Optional[str] = None,
    limit: Optional[int] = None,
) -> Optional[List[Dict[str, Any]]]:
    """
    List activities for a date range, newest first.

    GET athlete/{id}/activities

    Returns:
        [{id, name, type, start_date_local, distance, ...}]
    """
    return client.make_request(
        "GET",
        f"athlete/{athlete_id}/activities",
        params={"oldest": oldest, "newest": newest, "limit": limit},
    )


def get_activity(client: IntervalsClient, activity_id: str) -> Optional[Dict[str, Any]]:
    """
    Get a single activity.

    GET activity/{id}

    Returns:
        {id, name, type, start_date_local, icu_average_watts, zones?, ...}
    """
    return client.make_request("GET", f"activity/{activity_id}")


def get_intervals(client: IntervalsClient, activity_id: str) -> Optional[Dict[str, Any]]:
    """
    Get the interval analysis of an activity.

    GET activity/{id}/intervals

    Returns:
        {id, analyzed, icu_intervals: [...], icu_groups: [...]}
    """
    return client.make_request("GET", f"activity/{activity_id}/intervals")
