"""
Calendar — what's coming up?

List, read, create and delete calendar events (single and bulk).
"""

import logging
from numbers import Real
from typing import Any, List, Mapping, Optional, Union

from intervals_mcp.api.listing import (
    DEFAULT_LIMIT,
    empty_message,
    fetch_limit,
    render_list,
    select,
)
from intervals_mcp.config import Settings
from intervals_mcp.formatting import format_event_details, format_event_summary
from intervals_mcp.model import EventInput, EventRef
from intervals_mcp.sdk import events as sdk_events
from intervals_mcp.sdk.client import IntervalsClient
from intervals_mcp.utils import default_date_range

logger = logging.getLogger(__name__)


def get_events(
    client: IntervalsClient,
    settings: Settings,
    athlete_id: Optional[str] = None,
    start_date: Optional[str] = None,
    end_date: Optional[str] = None,
    limit: Optional[int] = None,
    include_unnamed: bool = False,
) -> str:
    """Calendar events in a date range (default: last 30 days)."""
    athlete = settings.resolve_athlete_id(athlete_id)
    start, end = default_date_range(start_date, end_date)
    limit = DEFAULT_LIMIT if limit is None else limit
    include_unnamed = bool(include_unnamed)

    data = sdk_events.list_events(
        client, athlete,
        oldest=start, newest=end,
        limit=fetch_limit(limit, include_unnamed),
    )
    events = select(data, limit, include_unnamed)
    logger.info("Fetched events for %s (%s..%s): %d kept", athlete, start, end, len(events))

    if not events:
        return empty_message("events", athlete, include_unnamed)
    return render_list("Events", "event", events, format_event_summary)


def get_event_details(
    client: IntervalsClient,
    settings: Settings,
    event_id: Union[int, str, None],
    athlete_id: Optional[str] = None,
) -> str:
    """Full view of one event."""
    athlete = settings.resolve_athlete_id(athlete_id)
    event_id = _require_event_id(event_id)

    result = sdk_events.show_event(client, athlete, event_id)
    if not isinstance(result, Mapping):
        return f"No details found for event {event_id} (athlete {athlete})."
    return format_event_details(result)


def create_event(
    client: IntervalsClient,
    settings: Settings,
    event: Union[EventInput, Mapping[str, Any]],
    athlete_id: Optional[str] = None,
) -> str:
    """Create one event and show it as stored."""
    athlete = settings.resolve_athlete_id(athlete_id)
    if not isinstance(event, EventInput):
        event = EventInput.from_dict(event)
    event.validate()

    result = sdk_events.create_event(client, athlete, event.to_body(athlete))
    if not isinstance(result, Mapping):
        return f"Event creation failed for athlete {athlete}."
    logger.info("Created event %s for %s", result.get("id"), athlete)
    return format_event_details(result)


def create_bulk_events(
    client: IntervalsClient,
    settings: Settings,
    events: List[Union[EventInput, Mapping[str, Any]]],
    upsert: Optional[bool] = None,
    athlete_id: Optional[str] = None,
) -> str:
    """Create several events at once. Every event is validated before the call."""
    athlete = settings.resolve_athlete_id(athlete_id)
    if not events:
        raise ValueError("At least one event is required.")

    parsed = [e if isinstance(e, EventInput) else EventInput.from_dict(e) for e in events]
    for i, event in enumerate(parsed, start=1):
        try:
            event.validate()
        except ValueError as e:
            raise ValueError(f"Event {i}: {e}") from e

    result = sdk_events.create_multiple_events(
        client, athlete, [e.to_body() for e in parsed], upsert=upsert,
    )
    if not isinstance(result, list):
        return f"Bulk event creation failed for athlete {athlete}."
    return f"Successfully created {len(result)} events for athlete {athlete}."


def delete_event(
    client: IntervalsClient,
    settings: Settings,
    event_id: Union[int, str, None],
    others: Optional[bool] = None,
    not_before: Optional[str] = None,
    athlete_id: Optional[str] = None,
) -> str:
    """Delete one event, optionally with the events created alongside it."""
    athlete = settings.resolve_athlete_id(athlete_id)
    event_id = _require_event_id(event_id)

    result = sdk_events.delete_event(
        client, athlete, event_id, others=others, not_before=not_before,
    )
    if not isinstance(result, Mapping):
        return f"Event deletion failed for athlete {athlete}, event {event_id}."
    return f"Event {event_id} deleted for athlete {athlete}."


def delete_bulk_events(
    client: IntervalsClient,
    settings: Settings,
    events: List[Union[EventRef, Mapping[str, Any]]],
    athlete_id: Optional[str] = None,
) -> str:
    """Delete events by id or external_id. Success is judged on the returned count."""
    athlete = settings.resolve_athlete_id(athlete_id)
    if not events:
        raise ValueError("At least one event is required.")

    refs = [e if isinstance(e, EventRef) else EventRef.from_dict(e) for e in events]
    for ref in refs:
        ref.validate()

    result = sdk_events.delete_events_bulk(client, athlete, [r.to_body() for r in refs])
    deleted = result.get("eventsDeleted") if isinstance(result, Mapping) else None
    if not isinstance(deleted, Real) or isinstance(deleted, bool):
        return f"Bulk event deletion failed for athlete {athlete}."
    return f"Successfully deleted {deleted} events for athlete {athlete}."


def _require_event_id(event_id: Union[int, str, None]) -> int:
    """Accept an int or a string of digits."""
    if event_id is None or event_id == "":
        raise ValueError("event_id is required")
    if isinstance(event_id, str):
        if not event_id.isdigit():
            raise ValueError(f"event_id must be numeric, got '{event_id}'")
        return int(event_id)
    return event_id
