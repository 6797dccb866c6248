"""
High-Level API — one function per tool.

Every function takes the client and the settings explicitly and returns a
single text payload. Missing identifiers raise ValueError and HTTP failures
propagate; empty or malformed responses come back as plain messages.

Modules:
    athlete    — Who are you?        (profile)
    activities — What have you done? (activity list, details, intervals)
    events     — What's coming up?   (calendar read, create, delete)
    wellness   — How are you now?    (daily wellness records)
    workouts   — What can you do?    (workout library)
"""

from intervals_mcp.api.athlete import get_athlete_details

from intervals_mcp.api.activities import (
    get_activities,
    get_activity_details,
    get_activity_intervals,
)

from intervals_mcp.api.events import (
    get_events,
    get_event_details,
    create_event,
    create_bulk_events,
    delete_event,
    delete_bulk_events,
)

from intervals_mcp.api.wellness import get_wellness_data

from intervals_mcp.api.workouts import get_workouts

__all__ = [
    "get_athlete_details",
    "get_activities", "get_activity_details", "get_activity_intervals",
    "get_events", "get_event_details", "create_event", "create_bulk_events",
    "delete_event", "delete_bulk_events",
    "get_wellness_data",
    "get_workouts",
]
