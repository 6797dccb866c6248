"""
Workout library tool for the Intervals.icu MCP server.
"""

from intervals_mcp.api import workouts as api_workouts


def register_tools(app, client, settings):
    """Register workout library tools with the MCP app."""

    @app.tool()
    async def get_workouts(athlete_id: str = None, limit: int = 10) -> str:
        """
        Get the workouts stored in the athlete's Intervals.icu library.

        Args:
            athlete_id: The Intervals.icu athlete ID (optional, defaults to the configured athlete)
            limit: Maximum number of workouts to return (default: 10)

        Returns:
            Name, sport, duration, TSS and interval count of each workout
        """
        return api_workouts.get_workouts(client, settings, athlete_id, limit)

    return app
