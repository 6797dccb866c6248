"""
Shared pytest fixtures for Intervals.icu MCP testing.
"""
import pytest
from unittest.mock import Mock

from mcp.server.fastmcp import FastMCP

from intervals_mcp.config import Settings


def get_tool_result_text(result):
    """Extract text from tool result.

    FastMCP call_tool returns a tuple (list_of_TextContent, metadata_dict).
    This helper extracts the text from the first TextContent item.
    """
    # Handle tuple return: (content_list, metadata)
    if isinstance(result, tuple) and len(result) > 0:
        result = result[0]
    if isinstance(result, list) and len(result) > 0:
        if hasattr(result[0], 'text'):
            return result[0].text
    return str(result)


@pytest.fixture
def settings():
    """Settings with a configured default athlete."""
    return Settings(
        api_base_url="https://intervals.icu/api/v1",
        api_key="test_api_key",
        athlete_id="i123456",
    )


@pytest.fixture
def mock_client(settings):
    """Mock SDK client. api/ tests patch the sdk modules, so make_request is never reached."""
    client = Mock()
    client.settings = settings
    client.make_request = Mock()
    return client


def create_test_app(module, client, settings):
    """Helper to create a FastMCP app with a specific module registered."""
    app = FastMCP(f"Test Intervals {module.__name__}")
    app = module.register_tools(app, client, settings)
    return app
