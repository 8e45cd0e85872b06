"""
Performance tools for the Garmin Connect MCP client.

VO2 Max, training status, endurance score and race predictions.
"""

from typing import Literal

from garmin_connect_mcp.gateway import ToolGateway
from garmin_connect_mcp.utils import compact


def register_tools(app, gateway: ToolGateway):
    """Register performance tools with the MCP app."""

    @app.tool()
    async def get_max_metrics(date: str) -> str:
        """
        Get VO2 Max and Fitness Age.

        Args:
            date: Date in YYYY-MM-DD format
        """
        return gateway.run("get_max_metrics", {"date": date})

    @app.tool()
    async def get_training_status(date: str) -> str:
        """
        Get training status and load.

        Args:
            date: Date in YYYY-MM-DD format
        """
        return gateway.run("get_training_status", {"date": date})

    @app.tool()
    async def get_endurance_score(startdate: str, enddate: str | None = None) -> str:
        """
        Get endurance score.

        Args:
            startdate: Start date in YYYY-MM-DD format
            enddate: End date in YYYY-MM-DD format (optional)
        """
        return gateway.run(
            "get_endurance_score",
            compact(startdate=startdate, enddate=enddate),
        )

    @app.tool()
    async def get_race_predictions(
        startdate: str | None = None,
        enddate: str | None = None,
        prediction_type: Literal["latest", "daily"] | None = None,
    ) -> str:
        """
        Get race time predictions (5K, 10K, half marathon, marathon).

        Args:
            startdate: Start date in YYYY-MM-DD format (optional)
            enddate: End date in YYYY-MM-DD format (optional)
            prediction_type: "latest" for the current prediction, "daily" for
                one prediction per day in the range

        Returns:
            JSON with predicted race times
        """
        return gateway.run(
            "get_race_predictions",
            compact(startdate=startdate, enddate=enddate, prediction_type=prediction_type),
        )

    return app
