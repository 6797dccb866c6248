"""
Wellness — how are you now?

Daily physiological and subjective records.
"""

from typing import Optional

from intervals_mcp.api.listing import render_list
from intervals_mcp.config import Settings
from intervals_mcp.formatting import format_wellness_entry
from intervals_mcp.sdk import wellness as sdk_wellness
from intervals_mcp.sdk.client import IntervalsClient
from intervals_mcp.utils import default_date_range


def get_wellness_data(
    client: IntervalsClient,
    settings: Settings,
    athlete_id: Optional[str] = None,
    start_date: Optional[str] = None,
    end_date: Optional[str] = None,
) -> str:
    """Wellness entries for a date range (default: last 30 days)."""
    athlete = settings.resolve_athlete_id(athlete_id)
    start, end = default_date_range(start_date, end_date)

    data = sdk_wellness.list_wellness_records(client, athlete, oldest=start, newest=end)
    if not isinstance(data, list) or not data:
        return f"No wellness data found for athlete {athlete} in the specified date range."
    return render_list("Wellness Data", "wellness", data, format_wellness_entry, separator="\n\n")
