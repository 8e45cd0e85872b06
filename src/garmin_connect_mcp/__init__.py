"""
MCP Server for the Garmin Connect HTTP API

Exposes Garmin workouts, activities, health metrics and performance
metrics as tools via the Model Context Protocol (MCP). Each tool forwards
its arguments to one endpoint of a remote Garmin Connect HTTP API.

Supports two transport modes:
- stdio: For single-user local usage (default)
- http: For HTTP server deployment
"""

import logging
import os

import requests
from fastmcp import FastMCP

from garmin_connect_mcp import activities
from garmin_connect_mcp import health
from garmin_connect_mcp import performance
from garmin_connect_mcp import workouts
from garmin_connect_mcp.client import GarminApiClient
from garmin_connect_mcp.config import GatewayConfig
from garmin_connect_mcp.gateway import ToolGateway

__version__ = "0.3.0"

SERVER_NAME = "garmin-connect-mcp-client"

logger = logging.getLogger(__name__)


def load_config() -> GatewayConfig:
    """Read the config from the environment, warning when credentials are missing."""
    config = GatewayConfig.from_env()
    if not config.email or not config.password:
        logger.warning("GARMIN_EMAIL and GARMIN_PASSWORD are not set; tool calls will fail")
    return config


def create_gateway(config: GatewayConfig = None, session: requests.Session = None) -> ToolGateway:
    """Build the tool gateway from an explicit config (defaults to the environment)."""
    if config is None:
        config = GatewayConfig.from_env()
    return ToolGateway(GarminApiClient(config, session=session))


def register_all(app, gateway: ToolGateway):
    """Register every tool category on an MCP app."""
    app = workouts.register_tools(app, gateway)
    app = activities.register_tools(app, gateway)
    app = health.register_tools(app, gateway)
    app = performance.register_tools(app, gateway)
    return app


def create_app(config: GatewayConfig = None, session: requests.Session = None) -> FastMCP:
    """Create and configure the MCP app with all tools registered."""
    gateway = create_gateway(config, session)

    app = FastMCP(SERVER_NAME)
    return register_all(app, gateway)


def configure_logging():
    """Log to stderr; stdout carries the stdio transport."""
    level = os.environ.get("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


def run_app(app: FastMCP, transport: str = "stdio", host: str = "0.0.0.0", port: int = 8081):
    """Run the app on the given transport."""
    if transport == "http":
        logger.info(f"Garmin Connect MCP Client server running on http://{host}:{port}/mcp")
        app.run(transport="http", host=host, port=port)
    else:
        logger.info("Garmin Connect MCP Client server running on stdio")
        app.run()


def main():
    """Initialize the MCP server and run with configured transport.

    Environment variables:
    - GARMIN_EMAIL, GARMIN_PASSWORD: Garmin credentials (required to call tools)
    - API_KEY: API key for the remote service (optional)
    - GARMIN_API_URL: Remote API base URL (optional)
    - LOG_LEVEL: Logging level (default: INFO)
    - MCP_TRANSPORT: 'stdio' (default) or 'http'
    - MCP_HOST: Host to bind to (default: '0.0.0.0')
    - MCP_PORT: Port for HTTP transport (default: 8081)
    """
    configure_logging()

    app = create_app(load_config())

    transport = os.environ.get("MCP_TRANSPORT", "stdio")
    host = os.environ.get("MCP_HOST", "0.0.0.0")
    port = int(os.environ.get("MCP_PORT", "8081"))
    run_app(app, transport, host, port)


if __name__ == "__main__":
    main()
