"""
Activity history — what have you done?

Activity lists, single-activity reports with zones and interval tables.
"""

import logging
from typing import Mapping, Optional

from intervals_mcp.api.listing import (
    DEFAULT_LIMIT,
    empty_message,
    fetch_limit,
    render_list,
    select,
)
from intervals_mcp.config import Settings
from intervals_mcp.formatting import (
    format_activity_summary,
    format_activity_zones,
    format_intervals,
    format_intervals_table,
)
from intervals_mcp.sdk import activities as sdk_activities
from intervals_mcp.sdk.client import IntervalsClient
from intervals_mcp.utils import default_date_range

logger = logging.getLogger(__name__)


def get_activities(
    client: IntervalsClient,
    settings: Settings,
    athlete_id: Optional[str] = None,
    start_date: Optional[str] = None,
    end_date: Optional[str] = None,
    limit: Optional[int] = None,
    include_unnamed: bool = False,
) -> str:
    """Activities in a date range (default: last 30 days), named ones only unless asked."""
    athlete = settings.resolve_athlete_id(athlete_id)
    start, end = default_date_range(start_date, end_date)
    limit = DEFAULT_LIMIT if limit is None else limit
    include_unnamed = bool(include_unnamed)

    data = sdk_activities.list_activities(
        client, athlete,
        oldest=start, newest=end,
        limit=fetch_limit(limit, include_unnamed),
    )
    activities = select(data, limit, include_unnamed)
    logger.info("Fetched activities for %s (%s..%s): %d kept", athlete, start, end, len(activities))

    if not activities:
        return empty_message("activities", athlete, include_unnamed)
    return render_list("Activities", "activity", activities, format_activity_summary)


def get_activity_details(
    client: IntervalsClient,
    activity_id: str,
    intervals: bool = True,
) -> str:
    """Full activity report, with zones and the interval tables appended."""
    if not activity_id:
        raise ValueError("activity_id is required")

    result = sdk_activities.get_activity(client, activity_id)
    if result is None:
        return f"No details found for activity {activity_id}."
    if not isinstance(result, Mapping):
        return f"Invalid activity format for activity {activity_id}."

    detailed_view = format_activity_summary(result) + format_activity_zones(result)

    if intervals:
        intervals_data = sdk_activities.get_intervals(client, activity_id)
        if isinstance(intervals_data, Mapping) and intervals_data:
            detailed_view += "\n\n" + format_intervals_table(intervals_data)

    return detailed_view


def get_activity_intervals(client: IntervalsClient, activity_id: str) -> str:
    """Verbose interval analysis of one activity."""
    if not activity_id:
        raise ValueError("activity_id is required")

    data = sdk_activities.get_intervals(client, activity_id)
    if not isinstance(data, Mapping) or not data:
        return f"No intervals data found for activity {activity_id}."
    return format_intervals(data)
