"""
Profile — who are you?
"""

import json
from typing import Mapping, Optional

from intervals_mcp.config import Settings
from intervals_mcp.sdk import athlete as sdk_athlete
from intervals_mcp.sdk.client import IntervalsClient


def get_athlete_details(
    client: IntervalsClient,
    settings: Settings,
    athlete_id: Optional[str] = None,
) -> str:
    """Athlete profile as indented JSON, or "No data"."""
    athlete = settings.resolve_athlete_id(athlete_id)

    data = sdk_athlete.get_athlete_profile(client, athlete)
    profile = data.get("athlete") if isinstance(data, Mapping) else None
    if profile is None:
        return "No data"
    return json.dumps(profile, indent=2)
