"""
Text renderers for Intervals.icu payloads.

Every formatter is pure and total: missing, null or unexpected fields degrade
to a literal fallback ("N/A", 0, "Unknown") and empty lists drop their
section. Nothing here raises on a well-formed mapping, whatever it contains.
"""

from typing import Any, List, Mapping, Union

from intervals_mcp.model import CalendarEvent, WorkoutPlan
from intervals_mcp.fields import (
    ACTIVITY_SECTIONS,
    NA,
    WELLNESS_BODY,
    WELLNESS_HEADER,
    WELLNESS_TRAINING,
    render_section,
    render_sections,
)
from intervals_mcp.utils import format_seconds, is_number


# ── Activities ───────────────────────────────────────────────────────────

def format_activity_summary(activity: Mapping[str, Any]) -> str:
    """Labeled multi-section report of one activity, ending with a newline."""
    return render_sections(activity, ACTIVITY_SECTIONS) + "\n"


def format_activity_zones(activity: Mapping[str, Any]) -> str:
    """Time in power and heart rate zones, or "" when the activity has none."""
    zones = activity.get("zones")
    if not isinstance(zones, Mapping):
        return ""

    result = ""
    for key, title in (("power", "Power Zones"), ("hr", "Heart Rate Zones")):
        buckets = zones.get(key)
        if not isinstance(buckets, list) or not buckets:
            continue
        result += f"\n{title}:\n"
        for zone in buckets:
            zone = zone if isinstance(zone, Mapping) else {}
            number = zone.get("number", NA)
            seconds = zone.get("secondsInZone", NA)
            result += f"Zone {number}: {seconds} seconds\n"
    return result


# ── Workouts ─────────────────────────────────────────────────────────────

def format_workout(workout: Mapping[str, Any]) -> str:
    """Short description of a planned workout."""
    plan = WorkoutPlan.from_dict(workout)
    return (
        f"Workout: {plan.name or 'Unnamed'}\n"
        f"Description: {plan.description or 'No description'}\n"
        f"Sport: {plan.sport or 'Unknown'}\n"
        f"Duration: {plan.duration or 0} seconds\n"
        f"TSS: {NA if plan.tss is None else plan.tss}\n"
        f"Intervals: {len(plan.intervals) if plan.intervals is not None else 0}\n"
    )


# ── Events ───────────────────────────────────────────────────────────────

def _as_event(event: Union[CalendarEvent, Mapping[str, Any]]) -> CalendarEvent:
    if isinstance(event, CalendarEvent):
        return event
    return CalendarEvent.from_dict(event)


def _or_na(value: Any) -> Any:
    return NA if value is None else value


def format_event_summary(event: Union[CalendarEvent, Mapping[str, Any]]) -> str:
    """Four-line summary: date, id, derived type, name."""
    ev = _as_event(event)
    return (
        f"Date: {ev.start_date_local or ev.date or 'Unknown'}\n"
        f"ID: {ev.id or NA}\n"
        f"Type: {ev.kind.value}\n"
        f"Name: {ev.name or 'Unnamed'}"
    )


def format_event_details(event: Union[CalendarEvent, Mapping[str, Any]]) -> str:
    """Full event view with optional workout, race and calendar sections."""
    ev = _as_event(event)
    details = (
        "Event Details:\n\n"
        f"ID: {ev.id or NA}\n"
        f"Date: {ev.date or 'Unknown'}\n"
        f"Name: {ev.name or 'Unnamed'}\n"
        f"Description: {ev.description or 'No description'}"
    )

    if ev.workout is not None:
        w = ev.workout
        details += (
            "\n\nWorkout Information:\n"
            f"Workout ID: {w.id or NA}\n"
            f"Sport: {w.sport or 'Unknown'}\n"
            f"Duration: {w.duration or 0} seconds\n"
            f"TSS: {_or_na(w.tss)}"
        )
        if w.intervals is not None:
            details += f"\nIntervals: {len(w.intervals)}"

    if ev.race is not None:
        details += (
            "\n\nRace Information:\n"
            f"Priority: {_or_na(ev.race.priority)}\n"
            f"Result: {_or_na(ev.race.result)}"
        )

    if ev.calendar is not None:
        details += f"\n\nCalendar: {_or_na(ev.calendar.name)}"

    return details


# ── Wellness ─────────────────────────────────────────────────────────────

def _sport_info_lines(entry: Mapping[str, Any]) -> str:
    sports = entry.get("sportInfo")
    if not isinstance(sports, list) or not sports:
        return "  None available"
    lines = []
    for sport in sports:
        sport = sport if isinstance(sport, Mapping) else {}
        lines.append(f"  * {sport.get('type') or 'Unknown'}: eFTP = {_or_na(sport.get('eftp'))}")
    return "\n".join(lines)


def format_wellness_entry(entry: Mapping[str, Any]) -> str:
    """Full daily wellness report."""
    blocks = [
        render_section(entry, WELLNESS_HEADER),
        render_section(entry, WELLNESS_TRAINING),
        "Sport-Specific Info:\n" + _sport_info_lines(entry),
        render_sections(entry, WELLNESS_BODY),
    ]
    return "\n\n".join(blocks)


# ── Intervals ────────────────────────────────────────────────────────────

GROUP_HEADER = (
    "| # | Type | Duration | Distance | Avg Power | Avg HR | Intensity | Speed |\n"
    "|---|------|----------|----------|-----------|---------|-----------|-------|\n"
)
INTERVAL_HEADER = (
    "| # | Type | Duration | Distance | Avg Power | Max Power | Avg HR | Max HR | Intensity | Speed |\n"
    "|---|------|----------|----------|-----------|-----------|---------|---------|-----------|-------|\n"
)


def _with_unit(value: Any, unit: str) -> str:
    return f"{value}{unit}" if value is not None else NA


def _km(meters: Any) -> str:
    return f"{meters / 1000:.2f}km" if is_number(meters) else NA


def _kmh(speed: Any) -> str:
    return f"{speed * 3.6:.1f}" if is_number(speed) else NA


def _rows(data: Mapping[str, Any], key: str) -> List[Mapping[str, Any]]:
    items = data.get(key)
    if not isinstance(items, list):
        return []
    return [item if isinstance(item, Mapping) else {} for item in items]


def _interval_type(value: Any) -> str:
    if not isinstance(value, str) or not value:
        return ""
    return value[0] + value[1:].lower()


def format_intervals_table(data: Mapping[str, Any]) -> str:
    """Markdown tables for interval groups and individual intervals.

    Each table appears only when its list is non-empty; with neither the
    result is an empty string.
    """
    result = ""

    groups = _rows(data, "icu_groups")
    if groups:
        result += "### Interval Groups\n\n" + GROUP_HEADER
        for i, group in enumerate(groups, start=1):
            count = group.get("count")
            cells = [
                str(i),
                f"({count}x)" if count else "",
                format_seconds(group.get("elapsed_time")),
                _km(group.get("distance")),
                _with_unit(group.get("average_watts"), "W"),
                _with_unit(group.get("average_heartrate"), " bpm"),
                _with_unit(group.get("intensity"), "%"),
                _kmh(group.get("average_speed")),
            ]
            result += "| " + " | ".join(cells) + " |\n"
        result += "\n"

    intervals = _rows(data, "icu_intervals")
    if intervals:
        result += "### Individual Intervals\n\n" + INTERVAL_HEADER
        for i, interval in enumerate(intervals, start=1):
            cells = [
                str(i),
                _interval_type(interval.get("type")),
                format_seconds(interval.get("elapsed_time")),
                _km(interval.get("distance")),
                _with_unit(interval.get("average_watts"), "W"),
                _with_unit(interval.get("max_watts"), "W"),
                _with_unit(interval.get("average_heartrate"), ""),
                _with_unit(interval.get("max_heartrate"), ""),
                _with_unit(interval.get("intensity"), "%"),
                _kmh(interval.get("average_speed")),
            ]
            result += "| " + " | ".join(cells) + " |\n"
        result += "\n"

    return result.strip()


def _format_interval_detail(i: int, iv: Mapping[str, Any]) -> str:
    def v(key: str) -> Any:
        return iv.get(key) or 0

    return (
        f"[{i}] {iv.get('label') or f'Interval {i}'} ({iv.get('type') or 'Unknown'})\n"
        f"Duration: {v('elapsed_time')} seconds (moving: {v('moving_time')} seconds)\n"
        f"Distance: {v('distance')} meters\n"
        f"Start-End Indices: {v('start_index')}-{v('end_index')}\n\n"
        "Power Metrics:\n"
        f"  Average Power: {v('average_watts')} watts ({v('average_watts_kg')} W/kg)\n"
        f"  Max Power: {v('max_watts')} watts ({v('max_watts_kg')} W/kg)\n"
        f"  Weighted Avg Power: {v('weighted_average_watts')} watts\n"
        f"  Intensity: {v('intensity')}\n"
        f"  Training Load: {v('training_load')}\n"
        f"  Joules: {v('joules')}\n"
        f"  Joules > FTP: {v('joules_above_ftp')}\n"
        f"  Power Zone: {iv.get('zone') or NA} ({v('zone_min_watts')}-{v('zone_max_watts')} watts)\n"
        f"  W' Balance: Start {v('wbal_start')}, End {v('wbal_end')}\n"
        f"  L/R Balance: {v('avg_lr_balance')}\n"
        f"  Variability: {v('w5s_variability')}\n"
        f"  Torque: Avg {v('average_torque')}, Min {v('min_torque')}, Max {v('max_torque')}\n\n"
        "Heart Rate & Metabolic:\n"
        f"  Heart Rate: Avg {v('average_heartrate')}, Min {v('min_heartrate')}, Max {v('max_heartrate')} bpm\n"
        f"  Decoupling: {v('decoupling')}\n"
        f"  DFA α1: {v('average_dfa_a1')}\n"
        f"  Respiration: {v('average_respiration')} breaths/min\n"
        f"  EPOC: {v('average_epoc')}\n"
        f"  SmO2: {v('average_smo2')}% / {v('average_smo2_2')}%\n"
        f"  THb: {v('average_thb')} / {v('average_thb_2')}\n\n"
        "Speed & Cadence:\n"
        f"  Speed: Avg {v('average_speed')}, Min {v('min_speed')}, Max {v('max_speed')} m/s\n"
        f"  GAP: {v('gap')} m/s\n"
        f"  Cadence: Avg {v('average_cadence')}, Min {v('min_cadence')}, Max {v('max_cadence')} rpm\n"
        f"  Stride: {v('average_stride')}\n\n"
        "Elevation & Environment:\n"
        f"  Elevation Gain: {v('total_elevation_gain')} meters\n"
        f"  Altitude: Min {v('min_altitude')}, Max {v('max_altitude')} meters\n"
        f"  Gradient: {v('average_gradient')}%\n"
        f"  Temperature: {v('average_temp')}°C (Weather: {v('average_weather_temp')}°C, "
        f"Feels like: {v('average_feels_like')}°C)\n"
        f"  Wind: Speed {v('average_wind_speed')} km/h, Gust {v('average_wind_gust')} km/h, "
        f"Direction {v('prevailing_wind_deg')}°\n"
        f"  Headwind: {v('headwind_percent')}%, Tailwind: {v('tailwind_percent')}%\n\n"
    )


def _format_group_detail(i: int, group: Mapping[str, Any]) -> str:
    def v(key: str) -> Any:
        return group.get(key) or 0

    return (
        f"Group: {group.get('id') or f'Group {i}'} (Contains {v('count')} intervals)\n"
        f"Duration: {v('elapsed_time')} seconds (moving: {v('moving_time')} seconds)\n"
        f"Distance: {v('distance')} meters\n"
        f"Start-End Indices: {v('start_index')}-{NA}\n\n"
        f"Power: Avg {v('average_watts')} watts ({v('average_watts_kg')} W/kg), Max {v('max_watts')} watts\n"
        f"W. Avg Power: {v('weighted_average_watts')} watts, Intensity: {v('intensity')}\n"
        f"Heart Rate: Avg {v('average_heartrate')}, Max {v('max_heartrate')} bpm\n"
        f"Speed: Avg {v('average_speed')}, Max {v('max_speed')} m/s\n"
        f"Cadence: Avg {v('average_cadence')}, Max {v('max_cadence')} rpm\n\n"
    )


def format_intervals(data: Mapping[str, Any]) -> str:
    """Verbose per-interval and per-group physiological dump."""
    result = (
        "Intervals Analysis:\n\n"
        f"ID: {data.get('id') or NA}\n"
        f"Analyzed: {_or_na(data.get('analyzed'))}\n\n"
    )

    intervals = _rows(data, "icu_intervals")
    if intervals:
        result += "Individual Intervals:\n\n"
        for i, interval in enumerate(intervals, start=1):
            result += _format_interval_detail(i, interval)

    groups = _rows(data, "icu_groups")
    if groups:
        result += "Interval Groups:\n\n"
        for i, group in enumerate(groups, start=1):
            result += _format_group_detail(i, group)

    return result
