"""
Shared pytest fixtures for Garmin Connect MCP testing.
"""
import json
import pytest
from unittest.mock import Mock

import requests
from mcp.server.fastmcp import FastMCP

from garmin_connect_mcp.client import GarminApiClient
from garmin_connect_mcp.config import GatewayConfig
from garmin_connect_mcp.gateway import ToolGateway


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


def make_response(status_code=200, body=None, text=None):
    """Build a fake requests.Response with a JSON (or raw text) body."""
    response = Mock(spec=requests.Response)
    response.status_code = status_code
    response.text = text if text is not None else json.dumps(body)
    return response


def sent_request(mock_session):
    """Return (url, headers, body) of the single POST made on the session."""
    mock_session.post.assert_called_once()
    call = mock_session.post.call_args
    return call.args[0], call.kwargs["headers"], call.kwargs["json"]


@pytest.fixture
def gateway_config():
    """Config with test credentials and no API key."""
    return GatewayConfig(
        base_url="https://garmin.test",
        email="runner@test.com",
        password="s3cret",
    )


@pytest.fixture
def mock_session():
    """Mock requests session answering every POST with 200 {"ok": true}."""
    session = Mock(spec=requests.Session)
    session.post.return_value = make_response(200, {"ok": True})
    return session


@pytest.fixture
def api_client(gateway_config, mock_session):
    return GarminApiClient(gateway_config, session=mock_session)


@pytest.fixture
def gateway(api_client):
    return ToolGateway(api_client)


def create_test_app(module, gateway):
    """Helper to create a FastMCP app with a specific module registered."""
    app = FastMCP(f"Test Garmin {module.__name__}")
    app = module.register_tools(app, gateway)
    return app
