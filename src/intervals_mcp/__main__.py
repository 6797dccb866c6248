"""
Entry point for running intervals_mcp as a module.

Usage:
    python -m intervals_mcp                    # Run with stdio transport
    python -m intervals_mcp --http             # Run with HTTP transport
    python -m intervals_mcp --http --port 9000 # Run HTTP on custom port
"""

import argparse
import os

from intervals_mcp import main as run_server


def main():
    parser = argparse.ArgumentParser(
        description="Intervals.icu MCP Server - activities, events and wellness data for AI assistants"
    )
    parser.add_argument(
        "--http",
        action="store_true",
        help="Use http transport instead of stdio"
    )
    parser.add_argument(
        "--host",
        default="0.0.0.0",
        help="Host to bind to (default: 0.0.0.0)"
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8081,
        help="Port for HTTP transport (default: 8081)"
    )

    args = parser.parse_args()

    if args.http:
        os.environ["MCP_TRANSPORT"] = "http"
        os.environ["MCP_HOST"] = args.host
        os.environ["MCP_PORT"] = str(args.port)
    else:
        os.environ["MCP_TRANSPORT"] = "stdio"

    run_server()


if __name__ == "__main__":
    main()
