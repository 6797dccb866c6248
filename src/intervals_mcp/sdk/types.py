"""
Intervals.icu API types and closed value sets.

All categorical values accepted by the event endpoints live here.
The Literal aliases drive the tool input schemas; the frozensets drive
validation of nested inputs (bulk create) that bypass the signature.
"""

from typing import Literal, get_args


ActivityType = Literal[
    "Ride",
    "MTB",
    "Gravel Ride",
    "Track Cycling",
    "Run",
    "Trail Run",
    "Swim",
    "Virtual Ride",
    "Virtual Run",
    "Weight Training",
    "Hike",
    "Walk",
    "Alpine Ski",
    "Badminton",
    "Backcountry Ski",
    "Canoeing",
    "Crossfit",
    "E-Bike Ride",
    "E-MTB Ride",
    "Elliptical",
    "Golf",
    "Handcycle",
    "HIIT",
    "Hockey",
    "Ice Skate",
    "Inline Skate",
    "Kayaking",
    "Kitesurf",
    "Nordic Ski",
    "Open Water Swim",
    "Pilates",
    "Padel",
    "Pickleball",
    "Racquetball",
    "Rock Climbing",
    "Roller Ski",
    "Rowing",
    "Virtual Rowing",
    "Rugby",
    "Sail",
    "Skateboard",
    "Snowboard",
    "Snowshoe",
    "Soccer",
    "Squash",
    "Stair-Stepper",
    "Stand Up Paddling",
    "Surfing",
    "Table Tennis",
    "Tennis",
    "Transition",
    "Velomobile",
    "Water Sport",
    "Wheelchair",
    "Windsurf",
    "Workout",
    "Yoga",
    "Other",
]

EventCategory = Literal[
    "WORKOUT",
    "RACE_A",
    "RACE_B",
    "RACE_C",
    "NOTE",
    "HOLIDAY",
    "SICK",
    "INJURED",
    "SET_EFTP",
    "FITNESS_DAYS",
    "SEASON_START",
    "TARGET",
    "SET_FITNESS",
]

TargetType = Literal["AUTO", "POWER", "HR", "PACE"]

ACTIVITY_TYPES = frozenset(get_args(ActivityType))
EVENT_CATEGORIES = frozenset(get_args(EventCategory))
TARGET_TYPES = frozenset(get_args(TargetType))

DEFAULT_CATEGORY = "WORKOUT"
DEFAULT_TARGET = "AUTO"
