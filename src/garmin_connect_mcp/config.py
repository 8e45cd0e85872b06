"""
Configuration for the Garmin Connect MCP client.

Read once from the environment at startup and passed explicitly to the
HTTP client and tool gateway.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional, Tuple

DEFAULT_API_URL = "https://fgggkckgk8osog4osgg4484k.mart1m.fr"


class GatewayError(Exception):
    """Base class for tool gateway failures."""


class ConfigurationError(GatewayError):
    """Required configuration (credentials) is missing."""


@dataclass(frozen=True)
class GatewayConfig:
    """Static configuration for the remote Garmin Connect HTTP API."""
    base_url: str = DEFAULT_API_URL
    email: Optional[str] = None
    password: Optional[str] = None
    api_key: Optional[str] = None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] = None) -> "GatewayConfig":
        """Build a config from environment variables.

        Environment variables:
        - GARMIN_EMAIL: Garmin account email (required to call tools)
        - GARMIN_PASSWORD: Garmin account password (required to call tools)
        - API_KEY: API key for the remote service (optional)
        - GARMIN_API_URL: Base URL of the remote service (optional)

        Missing credentials are not an error here so the server can still
        start and list its tools; see credentials().
        """
        if environ is None:
            environ = os.environ

        base_url = environ.get("GARMIN_API_URL") or DEFAULT_API_URL

        return cls(
            base_url=base_url.rstrip("/"),
            email=environ.get("GARMIN_EMAIL") or None,
            password=environ.get("GARMIN_PASSWORD") or None,
            api_key=environ.get("API_KEY") or None,
        )

    def credentials(self) -> Tuple[str, str]:
        """Return (email, password).

        Raises:
            ConfigurationError: If either value is missing
        """
        if not self.email or not self.password:
            raise ConfigurationError(
                "GARMIN_EMAIL and GARMIN_PASSWORD environment variables are required"
            )
        return self.email, self.password
