"""
Intervals.icu calendar events SDK functions.
"""

from typing import Any, Dict, List, Optional, Union

from intervals_mcp.sdk.client import IntervalsClient


def list_events(
    client: IntervalsClient,
    athlete_id: str,
    oldest: Optional[str] = None,
    newest: Optional[str] = None,
    limit: Optional[int] = None,
) -> Optional[List[Dict[str, Any]]]:
    """
    List calendar events for a date range.

    GET athlete/{id}/events

    Returns:
        [{id, start_date_local, name, category, workout?, ...}]
    """
    return client.make_request(
        "GET",
        f"athlete/{athlete_id}/events",
        params={"oldest": oldest, "newest": newest, "limit": limit},
    )


def show_event(client: IntervalsClient, athlete_id: str, event_id: int) -> Optional[Dict[str, Any]]:
    """
    Get a single calendar event.

    GET athlete/{id}/events/{eventId}
    """
    return client.make_request("GET", f"athlete/{athlete_id}/events/{event_id}")


def create_event(
    client: IntervalsClient, athlete_id: str, event: Dict[str, Any],
) -> Optional[Dict[str, Any]]:
    """
    Create a calendar event.

    POST athlete/{id}/events

    Returns:
        The created event
    """
    return client.make_request("POST", f"athlete/{athlete_id}/events", json_data=event)


def create_multiple_events(
    client: IntervalsClient,
    athlete_id: str,
    events: List[Dict[str, Any]],
    upsert: Optional[bool] = None,
) -> Optional[List[Dict[str, Any]]]:
    """
    Create several events in one call.

    POST athlete/{id}/events/bulk?upsert=

    With upsert, events whose external_id matches one created by the same
    application are updated instead of duplicated.

    Returns:
        The created events
    """
    return client.make_request(
        "POST",
        f"athlete/{athlete_id}/events/bulk",
        params={"upsert": upsert},
        json_data=events,
    )


def delete_event(
    client: IntervalsClient,
    athlete_id: str,
    event_id: int,
    others: Optional[bool] = None,
    not_before: Optional[str] = None,
) -> Union[Dict[str, Any], None]:
    """
    Delete a calendar event.

    DELETE athlete/{id}/events/{eventId}?others=&notBefore=

    With others, events added at the same time are deleted too,
    except those before not_before.
    """
    return client.make_request(
        "DELETE",
        f"athlete/{athlete_id}/events/{event_id}",
        params={"others": others, "notBefore": not_before},
    )


def delete_events_bulk(
    client: IntervalsClient, athlete_id: str, events: List[Dict[str, Any]],
) -> Optional[Dict[str, Any]]:
    """
    Delete events by id or external_id.

    PUT athlete/{id}/events/bulk-delete

    Returns:
        {eventsDeleted: int}
    """
    return client.make_request(
        "PUT",
        f"athlete/{athlete_id}/events/bulk-delete",
        json_data=events,
    )
