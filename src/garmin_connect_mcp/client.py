"""
Garmin Connect HTTP API client.

Handles HTTP transport, credential headers and response parsing.
Tool-specific routing lives in the gateway and endpoint modules.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests

from garmin_connect_mcp.config import GatewayConfig

logger = logging.getLogger(__name__)


@dataclass
class ApiResult:
    """Result of a request to the remote API."""
    success: bool
    data: Any = None
    error: Optional[str] = None
    status_code: Optional[int] = None

    def to_dict(self) -> dict:
        """Failure payload relayed to the MCP caller."""
        return {"success": False, "error": self.error}


class GarminApiClient:
    """
    Garmin Connect HTTP API transport.

    One POST per call, no retries. The requests session can be injected
    so tests can stub the network.
    """

    def __init__(self, config: GatewayConfig, session: requests.Session = None):
        self._config = config
        self._session = session if session is not None else requests.Session()

    def build_headers(self) -> Dict[str, str]:
        """
        Build request headers for the remote API.

        Raises:
            ConfigurationError: If Garmin credentials are not configured
        """
        email, password = self._config.credentials()

        headers = {
            "Content-Type": "application/json",
            "X-Garmin-Email": email,
            "X-Garmin-Password": password,
        }
        if self._config.api_key:
            headers["X-API-Key"] = self._config.api_key
        return headers

    def post(self, endpoint: str, body: Dict[str, Any] = None) -> ApiResult:
        """
        POST a JSON body to an API endpoint.

        Args:
            endpoint: Endpoint path (e.g. "/api/health/get_sleep_data")
            body: JSON body; an empty object is sent when None

        Returns:
            ApiResult with the parsed JSON body on 2xx, or an error message

        Raises:
            ConfigurationError: If credentials are missing (no request is sent)
        """
        headers = self.build_headers()
        url = f"{self._config.base_url}{endpoint}"

        try:
            response = self._session.post(url, headers=headers, json=body or {})
        except requests.RequestException as e:
            logger.warning(f"Request to {endpoint} failed: {e}")
            return ApiResult(success=False, error=str(e))

        return self.parse_response(response)

    @staticmethod
    def parse_response(response: requests.Response) -> ApiResult:
        """Turn an HTTP response into an ApiResult."""
        status = response.status_code
        text = response.text

        try:
            parsed = json.loads(text)
        except ValueError:
            parsed = None
            parse_failed = True
        else:
            parse_failed = False

        if not 200 <= status < 300:
            detail = text if parse_failed else json.dumps(parsed, separators=(",", ":"))
            logger.warning(f"API returned status {status}")
            return ApiResult(
                success=False,
                error=f"API Error ({status}): {detail}",
                status_code=status,
            )

        if parse_failed:
            logger.warning(f"Could not parse API response (status {status})")
            return ApiResult(
                success=False,
                error=f"Failed to parse response: {text}",
                status_code=status,
            )

        return ApiResult(success=True, data=parsed, status_code=status)
