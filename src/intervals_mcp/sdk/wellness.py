"""
Intervals.icu wellness SDK functions.
"""

from typing import Any, Dict, List, Optional

from intervals_mcp.sdk.client import IntervalsClient


def list_wellness_records(
    client: IntervalsClient,
    athlete_id: str,
    oldest: Optional[str] = None,
    newest: Optional[str] = None,
) -> Optional[List[Dict[str, Any]]]:
    """
    List daily wellness records for a date range.

    GET athlete/{id}/wellness

    Returns:
        [{id (date), ctl, atl, weight, restingHR, hrv, sleepSecs, sportInfo, ...}]
    """
    return client.make_request(
        "GET",
        f"athlete/{athlete_id}/wellness",
        params={"oldest": oldest, "newest": newest},
    )
