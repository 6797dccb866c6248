"""
Athlete profile tool for the Intervals.icu MCP server.
"""

from intervals_mcp.api import athlete as api_athlete


def register_tools(app, client, settings):
    """Register athlete tools with the MCP app."""

    @app.tool()
    async def get_athlete_details(athlete_id: str = None) -> str:
        """
        Get athlete details.

        Returns the athlete's Intervals.icu profile: name, sport settings,
        thresholds (FTP, LTHR, max HR), weight, timezone and preferences.

        Args:
            athlete_id: The Intervals.icu athlete ID (optional, defaults to the configured athlete)

        Returns:
            JSON with the athlete profile, or "No data"
        """
        return api_athlete.get_athlete_details(client, settings, athlete_id)

    return app
