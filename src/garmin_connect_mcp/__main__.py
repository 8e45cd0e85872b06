"""
Entry point for running garmin_connect_mcp as a module.

Usage:
    python -m garmin_connect_mcp                    # Run with stdio transport
    python -m garmin_connect_mcp --http             # Run with HTTP transport
    python -m garmin_connect_mcp --http --port 9000 # Run HTTP on custom port
"""

import argparse

from garmin_connect_mcp import configure_logging, create_app, load_config, run_app


def main():
    parser = argparse.ArgumentParser(
        description="Garmin Connect MCP Server - tools for the Garmin Connect HTTP API"
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

    configure_logging()
    app = create_app(load_config())

    run_app(app, "http" if args.http else "stdio", args.host, args.port)


if __name__ == "__main__":
    main()
