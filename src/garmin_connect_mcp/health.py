"""
Health tools for the Garmin Connect MCP client.

Daily wellness metrics: summary, heart rate, sleep, stress, body battery,
HRV, readiness, steps, respiration and SpO2. All dates are YYYY-MM-DD.
"""

from garmin_connect_mcp.gateway import ToolGateway
from garmin_connect_mcp.utils import compact


def register_tools(app, gateway: ToolGateway):
    """Register health tools with the MCP app."""

    @app.tool()
    async def get_daily_summary(date: str | None = None) -> str:
        """
        Get daily health summary.

        Args:
            date: Date in YYYY-MM-DD format (optional, remote default: today)
        """
        return gateway.run("get_daily_summary", compact(date=date))

    @app.tool()
    async def get_heart_rate_data(date: str) -> str:
        """Get heart rate data for a date (YYYY-MM-DD)."""
        return gateway.run("get_heart_rate_data", {"date": date})

    @app.tool()
    async def get_sleep_data(date: str) -> str:
        """Get sleep data for a date (YYYY-MM-DD)."""
        return gateway.run("get_sleep_data", {"date": date})

    @app.tool()
    async def get_stress_data(date: str) -> str:
        """Get stress data for a date (YYYY-MM-DD)."""
        return gateway.run("get_stress_data", {"date": date})

    @app.tool()
    async def get_body_battery(startdate: str, enddate: str | None = None) -> str:
        """
        Get body battery data.

        Args:
            startdate: Start date in YYYY-MM-DD format
            enddate: End date in YYYY-MM-DD format (optional)
        """
        return gateway.run(
            "get_body_battery",
            compact(startdate=startdate, enddate=enddate),
        )

    @app.tool()
    async def get_resting_heart_rate(date: str) -> str:
        """Get resting heart rate for a date (YYYY-MM-DD)."""
        return gateway.run("get_resting_heart_rate", {"date": date})

    @app.tool()
    async def get_hrv_data(date: str) -> str:
        """Get HRV (Heart Rate Variability) data for a date (YYYY-MM-DD)."""
        return gateway.run("get_hrv_data", {"date": date})

    @app.tool()
    async def get_training_readiness(date: str) -> str:
        """Get training readiness score for a date (YYYY-MM-DD)."""
        return gateway.run("get_training_readiness", {"date": date})

    @app.tool()
    async def get_steps_data(date: str) -> str:
        """Get steps data for a date (YYYY-MM-DD)."""
        return gateway.run("get_steps_data", {"date": date})

    @app.tool()
    async def get_respiration_data(date: str) -> str:
        """Get respiration data for a date (YYYY-MM-DD)."""
        return gateway.run("get_respiration_data", {"date": date})

    @app.tool()
    async def get_spo2_data(date: str) -> str:
        """Get SpO2 (blood oxygen) data for a date (YYYY-MM-DD)."""
        return gateway.run("get_spo2_data", {"date": date})

    return app
