"""
Field resolution tables for Intervals.icu payloads.

Upstream records are loosely typed: the same metric can arrive under several
historical names (avgPower, icu_average_watts, average_watts). Each logical
field declares its candidate keys in priority order, its fallback, and its
unit suffix. Formatters render these tables; they never read raw keys for
the fields declared here.

Two resolution modes:
- default: the first key whose value is not None wins
- truthy:  the first key whose value is truthy wins (0 and "" are skipped)
"""

from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional, Sequence, Tuple, Union

from intervals_mcp.utils import capitalize_first, format_timestamp, is_number


NA = "N/A"


@dataclass(frozen=True)
class Field:
    """One labeled line resolved from a synonym chain."""
    label: str
    keys: Tuple[str, ...]
    fallback: Any = NA
    suffix: str = ""
    truthy: bool = False
    render: Optional[Callable[[Any], Any]] = None


@dataclass(frozen=True)
class Computed:
    """One labeled line whose value is derived from several keys."""
    label: str
    compute: Callable[[Mapping[str, Any]], Any]
    suffix: str = ""


Line = Union[Field, Computed]


@dataclass(frozen=True)
class Section:
    """A titled group of lines. Untitled sections render their lines only."""
    title: Optional[str]
    lines: Tuple[Line, ...]
    indent: str = ""


def resolve(record: Mapping[str, Any], keys: Sequence[str], truthy: bool = False) -> Any:
    """Return the first usable value among `keys`, or None."""
    for key in keys:
        value = record.get(key)
        if value is None:
            continue
        if truthy and not value:
            continue
        return value
    return None


def field_value(record: Mapping[str, Any], line: Line) -> Any:
    """Resolve a line to its display value (suffix not applied)."""
    if isinstance(line, Computed):
        return line.compute(record)
    value = resolve(record, line.keys, line.truthy)
    if value is None:
        value = line.fallback
    if line.render is not None:
        value = line.render(value)
    return value


def render_line(record: Mapping[str, Any], line: Line, indent: str = "") -> str:
    return f"{indent}{line.label}: {field_value(record, line)}{line.suffix}"


def render_section(record: Mapping[str, Any], section: Section) -> str:
    rendered = [render_line(record, line, section.indent) for line in section.lines]
    if section.title:
        rendered.insert(0, f"{section.title}:")
    return "\n".join(rendered)


def render_sections(record: Mapping[str, Any], sections: Sequence[Section]) -> str:
    """Render sections separated by a blank line."""
    return "\n\n".join(render_section(record, s) for s in sections)


def scaled(scale: str) -> Callable[[Any], Any]:
    """Append "/<scale>" to numeric values; anything else becomes N/A."""
    def _render(value: Any) -> Any:
        return f"{value}/{scale}" if is_number(value) else NA
    return _render


def phase(value: Any) -> str:
    """Menstrual phase with its first character capitalized."""
    if isinstance(value, str) and value:
        return capitalize_first(value)
    return NA


# ── Activity ─────────────────────────────────────────────────────────────

ACTIVITY_SECTIONS = (
    Section(None, (
        Field("Activity", ("name",), "Unnamed", truthy=True),
        Field("ID", ("id",), truthy=True),
        Field("Type", ("type",), "Unknown", truthy=True),
        Field("Date", ("startTime", "start_date"), "Unknown", truthy=True, render=format_timestamp),
        Field("Description", ("description",), truthy=True),
        Field("Distance", ("distance",), 0, " meters", truthy=True),
        Field("Duration", ("duration", "elapsed_time"), 0, " seconds"),
        Field("Moving Time", ("moving_time",), suffix=" seconds"),
        Field("Elevation Gain", ("elevationGain", "total_elevation_gain"), 0, " meters"),
        Field("Elevation Loss", ("total_elevation_loss",), suffix=" meters"),
    )),
    Section("Power Data", (
        Field("Average Power", ("avgPower", "icu_average_watts", "average_watts"), suffix=" watts"),
        Field("Weighted Avg Power", ("icu_weighted_avg_watts",), suffix=" watts"),
        Field("Training Load", ("trainingLoad", "icu_training_load")),
        Field("FTP", ("icu_ftp",), suffix=" watts"),
        Field("Kilojoules", ("icu_joules",)),
        Field("Intensity", ("icu_intensity",)),
        Field("Power:HR Ratio", ("icu_power_hr",)),
        Field("Variability Index", ("icu_variability_index",)),
    )),
    Section("Heart Rate Data", (
        Field("Average Heart Rate", ("avgHr", "average_heartrate"), suffix=" bpm"),
        Field("Max Heart Rate", ("max_heartrate",), suffix=" bpm"),
        Field("LTHR", ("lthr",), suffix=" bpm"),
        Field("Resting HR", ("icu_resting_hr",), suffix=" bpm"),
        Field("Decoupling", ("decoupling",)),
    )),
    Section("Other Metrics", (
        Field("Cadence", ("average_cadence",), suffix=" rpm"),
        Field("Calories", ("calories",)),
        Field("Average Speed", ("average_speed",), suffix=" m/s"),
        Field("Max Speed", ("max_speed",), suffix=" m/s"),
        Field("Average Stride", ("average_stride",)),
        Field("L/R Balance", ("avg_lr_balance",)),
        Field("Weight", ("icu_weight",), suffix=" kg"),
        Field("RPE", ("perceived_exertion", "icu_rpe"), render=scaled("10")),
        Field("Session RPE", ("session_rpe",)),
        Field("Feel", ("feel",), render=scaled("5")),
    )),
    Section("Environment", (
        Field("Trainer", ("trainer",)),
        Field("Average Temp", ("average_temp",), suffix="°C"),
        Field("Min Temp", ("min_temp",), suffix="°C"),
        Field("Max Temp", ("max_temp",), suffix="°C"),
        Field("Avg Wind Speed", ("average_wind_speed",), suffix=" km/h"),
        Field("Headwind %", ("headwind_percent",), suffix="%"),
        Field("Tailwind %", ("tailwind_percent",), suffix="%"),
    )),
    Section("Training Metrics", (
        Field("Fitness (CTL)", ("icu_ctl",)),
        Field("Fatigue (ATL)", ("icu_atl",)),
        Field("TRIMP", ("trimp",)),
        Field("Polarization Index", ("polarization_index",)),
        Field("Power Load", ("power_load",)),
        Field("HR Load", ("hr_load",)),
        Field("Pace Load", ("pace_load",)),
        Field("Efficiency Factor", ("icu_efficiency_factor",)),
    )),
    Section("Device Info", (
        Field("Device", ("device_name",)),
        Field("Power Meter", ("power_meter",)),
        Field("File Type", ("file_type",)),
    )),
)


# ── Wellness ─────────────────────────────────────────────────────────────

def sleep_hours(entry: Mapping[str, Any]) -> Any:
    """Hours of sleep: sleepSecs converted to 2 decimals, else sleepHours as given."""
    secs = entry.get("sleepSecs")
    if is_number(secs):
        return f"{secs / 3600:.2f}"
    hours = entry.get("sleepHours")
    if hours is not None:
        return str(hours)
    return NA


def blood_pressure(entry: Mapping[str, Any]) -> str:
    systolic = resolve(entry, ("systolic",))
    diastolic = resolve(entry, ("diastolic",))
    return f"{NA if systolic is None else systolic}/{NA if diastolic is None else diastolic}"


def lock_status(entry: Mapping[str, Any]) -> str:
    return "Locked" if entry.get("locked") else "Unlocked"


WELLNESS_HEADER = Section(None, (
    Field("Date", ("date",), "Unknown date", truthy=True),
    Field("ID", ("id",), truthy=True),
))

WELLNESS_TRAINING = Section("Training Metrics", (
    Field("Fitness (CTL)", ("ctl",)),
    Field("Fatigue (ATL)", ("atl",)),
    Field("Ramp Rate", ("rampRate",)),
    Field("CTL Load", ("ctlLoad",)),
    Field("ATL Load", ("atlLoad",)),
), indent="  ")

WELLNESS_BODY = (
    Section("Vital Signs", (
        Field("Weight", ("weight",), suffix=" kg"),
        Field("Resting HR", ("restingHR",), suffix=" bpm"),
        Field("HRV", ("hrv",)),
        Field("HRV SDNN", ("hrvSDNN",)),
        Field("Average Sleeping HR", ("avgSleepingHR",), suffix=" bpm"),
        Field("SpO2", ("spO2",), suffix="%"),
        Computed("Blood Pressure", blood_pressure, " mmHg"),
        Field("Respiration", ("respiration",), suffix=" breaths/min"),
        Field("Blood Glucose", ("bloodGlucose",), suffix=" mmol/L"),
        Field("Lactate", ("lactate",), suffix=" mmol/L"),
        Field("VO2 Max", ("vo2max",), suffix=" ml/kg/min"),
        Field("Body Fat", ("bodyFat",), suffix="%"),
        Field("Abdomen", ("abdomen",), suffix=" cm"),
        Field("Baevsky Stress Index", ("baevskySI",)),
    ), indent="  "),
    Section("Sleep & Recovery", (
        Computed("Sleep", sleep_hours, " hours"),
        Field("Sleep Score", ("sleepScore",)),
        Field("Sleep Quality", ("sleepQuality",), suffix="/4"),
        Field("Readiness Score", ("readiness",)),
    ), indent="  "),
    Section("Menstrual Tracking", (
        Field("Menstrual Phase", ("menstrualPhase",), render=phase),
        Field("Predicted Phase", ("menstrualPhasePredicted",), render=phase),
    ), indent="  "),
    Section("Subjective Feelings", (
        Field("Soreness", ("soreness",), suffix="/14"),
        Field("Fatigue", ("fatigue",), suffix="/4"),
        Field("Stress", ("stress",), suffix="/4"),
        Field("Mood", ("mood",), suffix="/4"),
        Field("Motivation", ("motivation",), suffix="/4"),
        Field("Injury Level", ("injury",), suffix="/4"),
    ), indent="  "),
    Section("Nutrition & Hydration", (
        Field("Calories Consumed", ("kcalConsumed",), suffix=" kcal"),
        Field("Hydration Score", ("hydration",), suffix="/4"),
        Field("Hydration Volume", ("hydrationVolume",), suffix=" ml"),
    ), indent="  "),
    Section("Activity", (
        Field("Steps", ("steps",)),
    ), indent="  "),
    Section(None, (
        Field("Comments", ("comments",), "No comments"),
        Computed("Status", lock_status),
        Field("Last Updated", ("updated",), "Unknown"),
    )),
)
