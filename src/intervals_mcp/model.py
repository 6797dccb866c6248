"""
Domain types for Intervals.icu calendar events.

Upstream events mark their category by the mere presence of a `workout` or
`race` sub-object. CalendarEvent.from_dict inspects the raw payload once and
records the result as an EventKind plus parsed sub-records, so formatters
never look at raw keys.

EventInput and EventRef are what the LLM sends to the create and bulk-delete
tools; they are validated before any network call.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional

from intervals_mcp.fields import resolve
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


class EventKind(Enum):
    """Display category of a calendar event. Workout wins over race."""
    WORKOUT = "Workout"
    RACE = "Race"
    OTHER = "Other"


@dataclass
class WorkoutPlan:
    """Structured workout attached to an event or stored in the library.

    Library workouts name their sport `type` and their duration `moving_time`.
    """
    id: Any = None
    name: Any = None
    description: Any = None
    sport: Any = None
    duration: Any = None
    tss: Any = None
    intervals: Optional[List[Any]] = None

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> "WorkoutPlan":
        intervals = d.get("intervals")
        return cls(
            id=d.get("id"),
            name=d.get("name"),
            description=d.get("description"),
            sport=resolve(d, ("sport", "type")),
            duration=resolve(d, ("duration", "moving_time")),
            tss=resolve(d, ("tss", "icu_training_load")),
            intervals=intervals if isinstance(intervals, list) else None,
        )


@dataclass
class RaceInfo:
    """Race priority and result. Both live on the event itself, not under `race`."""
    priority: Any = None
    result: Any = None


@dataclass
class CalendarRef:
    name: Any = None


@dataclass
class CalendarEvent:
    """A calendar event projected from the raw API payload."""
    kind: EventKind
    id: Any = None
    date: Any = None
    start_date_local: Any = None
    name: Any = None
    description: Any = None
    workout: Optional[WorkoutPlan] = None
    race: Optional[RaceInfo] = None
    calendar: Optional[CalendarRef] = None

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> "CalendarEvent":
        """Classify and project a raw event.

        The kind follows truthiness of `workout` then `race`. The workout and
        calendar sub-records are only parsed when they are objects.
        """
        raw_workout = d.get("workout")
        raw_race = d.get("race")
        raw_calendar = d.get("calendar")

        if raw_workout:
            kind = EventKind.WORKOUT
        elif raw_race:
            kind = EventKind.RACE
        else:
            kind = EventKind.OTHER

        return cls(
            kind=kind,
            id=d.get("id"),
            date=d.get("date"),
            start_date_local=d.get("start_date_local"),
            name=d.get("name"),
            description=d.get("description"),
            workout=WorkoutPlan.from_dict(raw_workout) if isinstance(raw_workout, Mapping) else None,
            race=RaceInfo(priority=d.get("priority"), result=d.get("result")) if raw_race else None,
            calendar=CalendarRef(name=raw_calendar.get("name")) if isinstance(raw_calendar, Mapping) else None,
        )


@dataclass
class EventInput:
    """An event to create, as provided by the LLM."""
    start_date_local: str
    name: str
    type: ActivityType
    category: EventCategory = DEFAULT_CATEGORY
    description: Optional[str] = None
    indoor: Optional[bool] = None
    color: Optional[str] = None
    moving_time: Optional[int] = None
    distance: Optional[float] = None
    tags: Optional[List[str]] = None
    target: TargetType = DEFAULT_TARGET
    training_load: Optional[int] = None

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> "EventInput":
        """Create an EventInput from a plain dict (as the LLM would provide)."""
        return cls(
            start_date_local=d.get("start_date_local"),
            name=d.get("name"),
            type=d.get("type"),
            category=d.get("category") or DEFAULT_CATEGORY,
            description=d.get("description"),
            indoor=d.get("indoor"),
            color=d.get("color"),
            moving_time=d.get("moving_time"),
            distance=d.get("distance"),
            tags=d.get("tags"),
            target=d.get("target") or DEFAULT_TARGET,
            training_load=d.get("training_load"),
        )

    def validate(self):
        """Validate required fields and closed value sets.

        Raises:
            ValueError: If the event is invalid.
        """
        if not self.start_date_local:
            raise ValueError("start_date_local is required (ISO-8601 local time, e.g. 2024-07-01T09:00:00)")
        if not self.name:
            raise ValueError("name is required")
        if self.type not in ACTIVITY_TYPES:
            raise ValueError(
                f"Invalid activity type '{self.type}'. "
                f"Must be one of: {', '.join(sorted(ACTIVITY_TYPES))}"
            )
        if self.category not in EVENT_CATEGORIES:
            raise ValueError(
                f"Invalid category '{self.category}'. "
                f"Must be one of: {', '.join(sorted(EVENT_CATEGORIES))}"
            )
        if self.target not in TARGET_TYPES:
            raise ValueError(
                f"Invalid target '{self.target}'. "
                f"Must be one of: {', '.join(sorted(TARGET_TYPES))}"
            )
        if self.tags is not None and not all(isinstance(t, str) for t in self.tags):
            raise ValueError("tags must be a list of strings")

    def to_body(self, athlete_id: Optional[str] = None) -> Dict[str, Any]:
        """Request body for the events endpoints. Unset fields are omitted."""
        body = {
            "start_date_local": self.start_date_local,
            "name": self.name,
            "type": self.type,
            "category": self.category,
            "indoor": self.indoor,
            "color": self.color,
            "moving_time": self.moving_time,
            "distance": self.distance,
            "tags": self.tags,
            "athlete_id": athlete_id,
            "description": self.description,
            "target": self.target,
            "icu_training_load": self.training_load,
        }
        return {k: v for k, v in body.items() if v is not None}


@dataclass
class EventRef:
    """Reference to an event to delete: its id, its external_id, or both."""
    id: Optional[int] = None
    external_id: Optional[str] = None

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> "EventRef":
        return cls(id=d.get("id"), external_id=d.get("external_id"))

    def validate(self):
        if self.id is None and not self.external_id:
            raise ValueError("Each event must have an id or an external_id")

    def to_body(self) -> Dict[str, Any]:
        body = {"id": self.id, "external_id": self.external_id}
        return {k: v for k, v in body.items() if v is not None}
