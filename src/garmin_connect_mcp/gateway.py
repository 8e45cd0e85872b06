"""
Tool gateway: maps MCP tool invocations onto remote API calls.
"""

import json
import logging
from typing import Any, Dict

from fastmcp.exceptions import ToolError

from garmin_connect_mcp.client import ApiResult, GarminApiClient
from garmin_connect_mcp.config import GatewayError
from garmin_connect_mcp.endpoints import get_endpoint

logger = logging.getLogger(__name__)


class UnknownToolError(GatewayError):
    """Tool name has no endpoint mapping."""

    def __init__(self, tool_name: str):
        super().__init__(f"Unknown tool: {tool_name}")
        self.tool_name = tool_name


class ToolGateway:
    """Forwards tool arguments to the endpoint mapped to the tool name."""

    def __init__(self, client: GarminApiClient):
        self._client = client

    def invoke(self, tool_name: str, arguments: Dict[str, Any] = None) -> ApiResult:
        """
        Call the remote endpoint for a tool.

        Args:
            tool_name: Registered tool name
            arguments: Tool arguments, forwarded verbatim as the JSON body

        Returns:
            ApiResult from the remote API

        Raises:
            UnknownToolError: If the tool has no endpoint (nothing is sent)
            ConfigurationError: If credentials are missing (nothing is sent)
        """
        endpoint = get_endpoint(tool_name)
        if endpoint is None:
            raise UnknownToolError(tool_name)

        logger.debug(f"Forwarding {tool_name} to {endpoint}")
        result = self._client.post(endpoint, arguments or {})
        if not result.success:
            logger.warning(f"Tool {tool_name} failed: {result.error}")
        return result

    def run(self, tool_name: str, arguments: Dict[str, Any] = None) -> str:
        """
        Invoke a tool and render the outcome for the MCP caller.

        Returns:
            The remote JSON body, pretty-printed

        Raises:
            ToolError: With a {"success": false, "error": ...} JSON payload,
                which FastMCP reports as an error-flagged tool result
        """
        try:
            result = self.invoke(tool_name, arguments)
        except GatewayError as e:
            result = ApiResult(success=False, error=str(e))

        if not result.success:
            raise ToolError(json.dumps(result.to_dict(), indent=2))

        return json.dumps(result.data, indent=2)
