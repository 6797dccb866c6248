"""
Intervals.icu athlete SDK functions.
"""

from typing import Any, Dict, Optional

from intervals_mcp.sdk.client import IntervalsClient


def get_athlete_profile(client: IntervalsClient, athlete_id: str) -> Optional[Dict[str, Any]]:
    """
    Get the athlete profile.

    GET athlete/{id}/profile

    Returns:
        {athlete: {id, name, ...}, sharedFolders, customItems}
    """
    return client.make_request("GET", f"athlete/{athlete_id}/profile")
