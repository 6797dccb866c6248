"""
MCP Server for Intervals.icu

Provides tools to read activities, events, wellness data and the athlete
profile from Intervals.icu, and to manage calendar events, via the Model
Context Protocol (MCP).

Supports two transport modes:
- stdio: For single-user local usage (default)
- http: For HTTP server deployment
"""

import logging
import os
import sys

from dotenv import load_dotenv
from fastmcp import FastMCP

from intervals_mcp import activities
from intervals_mcp import athlete
from intervals_mcp import events
from intervals_mcp import wellness
from intervals_mcp import workouts
from intervals_mcp.config import Settings
from intervals_mcp.sdk.client import IntervalsClient

logger = logging.getLogger(__name__)


def create_app(settings: Settings = None) -> FastMCP:
    """Create and configure the MCP app with all tools registered."""
    if settings is None:
        settings = Settings.from_env()

    app = FastMCP("Intervals.icu MCP Server")
    client = IntervalsClient(settings)

    app = athlete.register_tools(app, client, settings)
    app = activities.register_tools(app, client, settings)
    app = events.register_tools(app, client, settings)
    app = wellness.register_tools(app, client, settings)
    app = workouts.register_tools(app, client, settings)

    return app


def configure_logging(debug: bool = False) -> None:
    """Log to stderr so the stdio transport stays clean."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main():
    """Initialize the MCP server and run with configured transport.

    Environment variables (a .env file in the working directory is loaded first):
    - INTERVALS_API_BASE_URL, INTERVALS_API_KEY, INTERVALS_ATHLETE_ID: required
    - DEBUG: 'true' for request/response logging
    - MCP_TRANSPORT: 'stdio' (default) or 'http'
    - MCP_HOST: Host to bind to (default: '0.0.0.0')
    - MCP_PORT: Port for HTTP transport (default: 8081)
    """
    load_dotenv()
    settings = Settings.from_env()
    configure_logging(settings.debug)

    app = create_app(settings)

    transport = os.environ.get("MCP_TRANSPORT", "stdio")

    if transport == "http":
        host = os.environ.get("MCP_HOST", "0.0.0.0")
        port = int(os.environ.get("MCP_PORT", "8081"))
        logger.info("Starting Intervals.icu MCP server on http://%s:%d/mcp", host, port)
        app.run(transport="http", host=host, port=port)
    else:
        logger.info("Starting Intervals.icu MCP server on stdio")
        app.run()


if __name__ == "__main__":
    main()
