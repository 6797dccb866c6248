"""
Workout library — what can you schedule?
"""

from typing import Optional

from intervals_mcp.api.listing import DEFAULT_LIMIT, render_list
from intervals_mcp.config import Settings
from intervals_mcp.formatting import format_workout
from intervals_mcp.sdk import workouts as sdk_workouts
from intervals_mcp.sdk.client import IntervalsClient


def get_workouts(
    client: IntervalsClient,
    settings: Settings,
    athlete_id: Optional[str] = None,
    limit: Optional[int] = None,
) -> str:
    """Workouts stored in the athlete's library, first `limit` of them."""
    athlete = settings.resolve_athlete_id(athlete_id)
    limit = DEFAULT_LIMIT if limit is None else limit

    data = sdk_workouts.list_workouts(client, athlete)
    if not isinstance(data, list) or not data:
        return f"No workouts found in the library of athlete {athlete}."
    return render_list("Workouts", "workout", data[:limit], format_workout)
