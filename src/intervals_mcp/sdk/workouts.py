"""
Intervals.icu workout library SDK functions.
"""

from typing import Any, Dict, List, Optional

from intervals_mcp.sdk.client import IntervalsClient


def list_workouts(client: IntervalsClient, athlete_id: str) -> Optional[List[Dict[str, Any]]]:
    """
    List the workouts in the athlete's library.

    GET athlete/{id}/workouts

    Returns:
        [{id, name, description, type, moving_time, icu_training_load, workout_doc, ...}]
    """
    return client.make_request("GET", f"athlete/{athlete_id}/workouts")
