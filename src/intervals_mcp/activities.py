"""
Activity tools for the Intervals.icu MCP server.

Activity lists, detailed activity reports and interval analysis.
Delegates to api.activities for the heavy lifting.
"""

from intervals_mcp.api import activities as api_activities


def register_tools(app, client, settings):
    """Register activity tools with the MCP app."""

    @app.tool()
    async def get_activities(
        athlete_id: str = None,
        start_date: str = None,
        end_date: str = None,
        limit: int = 10,
        include_unnamed: bool = False,
    ) -> str:
        """
        Get a list of activities for an athlete from Intervals.icu.

        Unnamed activities are skipped unless include_unnamed is set.

        Args:
            athlete_id: The Intervals.icu athlete ID (optional, defaults to the configured athlete)
            start_date: Start date in YYYY-MM-DD format (optional, defaults to 30 days ago)
            end_date: End date in YYYY-MM-DD format (optional, defaults to today)
            limit: Maximum number of activities to return (default: 10)
            include_unnamed: Whether to include unnamed activities (default: False)

        Returns:
            Readable summary of each activity
        """
        return api_activities.get_activities(
            client, settings, athlete_id, start_date, end_date, limit, include_unnamed,
        )

    @app.tool()
    async def get_activity_details(activity_id: str, intervals: bool = True) -> str:
        """
        Get detailed information for a specific activity from Intervals.icu.

        Includes power, heart rate, environment and training metrics, time in
        zones, and (by default) tables of interval groups and intervals.

        Args:
            activity_id: The Intervals.icu activity ID (required)
            intervals: Include intervals analysis (default: True)

        Returns:
            Detailed activity report
        """
        return api_activities.get_activity_details(client, activity_id, intervals)

    @app.tool()
    async def get_activity_intervals(activity_id: str) -> str:
        """
        Get the full interval analysis of an activity from Intervals.icu.

        Every interval with power, heart rate, metabolic, speed, cadence,
        elevation and weather data, followed by the interval groups.

        Args:
            activity_id: The Intervals.icu activity ID (required)

        Returns:
            Verbose interval report
        """
        return api_activities.get_activity_intervals(client, activity_id)

    return app
