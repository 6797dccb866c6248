"""
Shared behaviour of the list tools (activities, events).

The API cannot filter out unnamed entries server-side, so when they are
excluded we ask for three times the requested limit, drop the unnamed ones
and truncate. This is best effort: fewer than `limit` entries may come back
even when more named ones exist outside the fetched page.
"""

from typing import Any, Callable, List, Mapping

OVERFETCH_FACTOR = 3
DEFAULT_LIMIT = 10


def fetch_limit(limit: int, include_unnamed: bool) -> int:
    """Upstream limit to request for a given result cap."""
    return limit if include_unnamed else limit * OVERFETCH_FACTOR


def has_name(item: Any) -> bool:
    if not isinstance(item, Mapping):
        return False
    name = item.get("name")
    return isinstance(name, str) and name.strip() != ""


def select(items: Any, limit: int, include_unnamed: bool) -> List[Any]:
    """Apply the unnamed filter and the cap to an upstream response."""
    if not isinstance(items, list):
        return []
    if not include_unnamed:
        items = [item for item in items if has_name(item)]
    return items[:limit]


def empty_message(entities: str, athlete_id: str, include_unnamed: bool) -> str:
    if include_unnamed:
        return f"No valid {entities} found for athlete {athlete_id} in the specified date range."
    return (
        f"No named {entities} found for athlete {athlete_id} in the specified date range. "
        f"Try with include_unnamed=True to see all {entities}."
    )


def render_list(
    header: str,
    entity: str,
    items: List[Any],
    formatter: Callable[[Mapping[str, Any]], str],
    separator: str = "\n",
) -> str:
    """"<Header>:" followed by each formatted item.

    Items that are not objects are rendered as an "Invalid <entity> format" line.
    """
    rendered = [
        formatter(item) if isinstance(item, Mapping) else f"Invalid {entity} format: {item}"
        for item in items
    ]
    return f"{header}:\n\n" + separator.join(rendered)
