"""
Intervals.icu Low-Level SDK.

Thin wrapper over the Intervals.icu HTTP API.
Each function maps 1:1 to an endpoint and returns the parsed JSON body untouched.
"""

from intervals_mcp.sdk.client import IntervalsClient
from intervals_mcp.sdk.types import (
    ActivityType,
    EventCategory,
    TargetType,
    ACTIVITY_TYPES,
    EVENT_CATEGORIES,
    TARGET_TYPES,
    DEFAULT_CATEGORY,
    DEFAULT_TARGET,
)

__all__ = [
    "IntervalsClient",
    "ActivityType",
    "EventCategory",
    "TargetType",
    "ACTIVITY_TYPES",
    "EVENT_CATEGORIES",
    "TARGET_TYPES",
    "DEFAULT_CATEGORY",
    "DEFAULT_TARGET",
]
