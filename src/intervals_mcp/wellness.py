"""
Wellness tool for the Intervals.icu MCP server.
"""

from intervals_mcp.api import wellness as api_wellness


def register_tools(app, client, settings):
    """Register wellness tools with the MCP app."""

    @app.tool()
    async def get_wellness_data(
        athlete_id: str = None,
        start_date: str = None,
        end_date: str = None,
    ) -> str:
        """
        Get wellness data for an athlete from Intervals.icu.

        Fitness/fatigue, vitals (HRV, resting HR, weight), sleep, subjective
        scores, menstrual tracking, nutrition and steps for each day.

        Args:
            athlete_id: The Intervals.icu athlete ID (optional, defaults to the configured athlete)
            start_date: Start date in YYYY-MM-DD format (optional, defaults to 30 days ago)
            end_date: End date in YYYY-MM-DD format (optional, defaults to today)

        Returns:
            One wellness report per day
        """
        return api_wellness.get_wellness_data(client, settings, athlete_id, start_date, end_date)

    return app
