"""
Calendar event tools for the Intervals.icu MCP server.

List, inspect, create and delete events, one at a time or in bulk.
Delegates to api.events for the heavy lifting.
"""

from intervals_mcp.api import events as api_events
from intervals_mcp.model import EventInput, EventRef
from intervals_mcp.sdk.types import ActivityType, EventCategory, TargetType


def register_tools(app, client, settings):
    """Register calendar event tools with the MCP app."""

    @app.tool()
    async def get_events(
        athlete_id: str = None,
        start_date: str = None,
        end_date: str = None,
        limit: int = 10,
        include_unnamed: bool = False,
    ) -> str:
        """
        Get a list of events for an athlete from Intervals.icu.

        Unnamed events are skipped unless include_unnamed is set.

        Args:
            athlete_id: The Intervals.icu athlete ID (optional, defaults to the configured athlete)
            start_date: Start date in YYYY-MM-DD format (optional, defaults to 30 days ago)
            end_date: End date in YYYY-MM-DD format (optional, defaults to today)
            limit: Maximum number of events to return (default: 10)
            include_unnamed: Whether to include unnamed events (default: False)

        Returns:
            Date, ID, type and name of each event
        """
        return api_events.get_events(
            client, settings, athlete_id, start_date, end_date, limit, include_unnamed,
        )

    @app.tool()
    async def get_event_details(event_id: int, athlete_id: str = None) -> str:
        """
        Get detailed information for a specific event from Intervals.icu.

        Args:
            event_id: The Intervals.icu event ID (required)
            athlete_id: The Intervals.icu athlete ID (optional, defaults to the configured athlete)

        Returns:
            Event details with workout, race and calendar information when present
        """
        return api_events.get_event_details(client, settings, event_id, athlete_id)

    @app.tool()
    async def create_event(
        start_date_local: str,
        name: str,
        type: ActivityType,
        category: EventCategory = "WORKOUT",
        description: str = None,
        indoor: bool = None,
        color: str = None,
        moving_time: int = None,
        distance: float = None,
        tags: list[str] = None,
        target: TargetType = "AUTO",
        training_load: int = None,
        athlete_id: str = None,
    ) -> str:
        """
        Create an event for the athlete, optionally including intervals in the Native Intervals.icu Workout Format.

        For workouts with intervals, write the description in the Native Intervals.icu
        Workout Format. Use specific target values (pace, percentage, watts) rather than
        descriptive terms like 'hard effort' or 'easy pace'.

        Workout steps start with '-':
        - Duration: '30s', '10m', '1m30'
        - Intensity: 100w, 80% (of FTP), 60% HR (of max HR), 100% LTHR, 90rpm
        - Ranges: 100-140w, 80-90%
        - Ramps: 'Ramp 100-200w' or 'Ramp 60-80%'
        - Distance: '3km 80% Pace'
        Put '6x' (or any count) on the line before a set of steps to repeat it.

        Example:
            Warmup
            - 20m 60% 90-100rpm

            Main set 6x
            - 4m 100% 40-50rpm
            - 5m recovery at 40%

            Cooldown
            - 20m 60% 90-100rpm

        Args:
            start_date_local: Start date and time in ISO-8601 local time, e.g. 2024-07-01T09:00:00 (required)
            name: Event name (required)
            type: Activity type, e.g. Ride, Run, Swim (required)
            category: Event category (default: WORKOUT)
            description: Event description, see the workout format above (optional)
            indoor: Is the event indoor? (optional)
            color: Event color (optional)
            moving_time: Planned moving time in seconds (optional)
            distance: Planned distance in meters (optional)
            tags: Tags for the event (optional)
            target: Target type for workout intensities (default: AUTO)
            training_load: Planned training load (optional)
            athlete_id: The Intervals.icu athlete ID (optional, defaults to the configured athlete)

        Returns:
            Details of the created event
        """
        event = EventInput(
            start_date_local=start_date_local,
            name=name,
            type=type,
            category=category,
            description=description,
            indoor=indoor,
            color=color,
            moving_time=moving_time,
            distance=distance,
            tags=tags,
            target=target,
            training_load=training_load,
        )
        return api_events.create_event(client, settings, event, athlete_id)

    @app.tool()
    async def create_bulk_events(
        events: list[EventInput],
        upsert: bool = None,
        athlete_id: str = None,
    ) -> str:
        """
        Create multiple events for the athlete in bulk.

        Each event takes the same fields as create_event.

        Args:
            events: Events to create (minimum 1)
            upsert: Update events with a matching external_id created by the same application instead of creating new ones (optional)
            athlete_id: The Intervals.icu athlete ID (optional, defaults to the configured athlete)

        Returns:
            Number of events created
        """
        return api_events.create_bulk_events(client, settings, events, upsert, athlete_id)

    @app.tool()
    async def delete_event(
        event_id: int,
        others: bool = None,
        not_before: str = None,
        athlete_id: str = None,
    ) -> str:
        """
        Delete an event for the athlete by event ID.

        Args:
            event_id: The event ID to delete (required)
            others: Also delete other events added at the same time (optional)
            not_before: Do not delete other events before this local date, ISO-8601 (optional)
            athlete_id: The Intervals.icu athlete ID (optional, defaults to the configured athlete)

        Returns:
            Deletion confirmation
        """
        return api_events.delete_event(client, settings, event_id, others, not_before, athlete_id)

    @app.tool()
    async def delete_bulk_events(events: list[EventRef], athlete_id: str = None) -> str:
        """
        Delete multiple events from the athlete's calendar by id or external_id.

        Args:
            events: Events to delete, each with an id or an external_id (minimum 1)
            athlete_id: The Intervals.icu athlete ID (optional, defaults to the configured athlete)

        Returns:
            Number of events deleted
        """
        return api_events.delete_bulk_events(client, settings, events, athlete_id)

    return app
