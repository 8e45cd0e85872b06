"""
Activity tools for the Garmin Connect MCP client.

Provides tools for querying recorded Garmin activities.
"""

from typing import Literal

from garmin_connect_mcp.gateway import ToolGateway
from garmin_connect_mcp.utils import compact


def register_tools(app, gateway: ToolGateway):
    """Register activity tools with the MCP app."""

    @app.tool()
    async def get_activities(
        start: int = 0,
        limit: int = 10,
        activitytype: str | None = None,
        simplify: bool = True,
    ) -> str:
        """
        Get list of activities.

        Returns simplified activities by default (~200 tokens each) with only
        essential fields for analysis. Set simplify=false for full data
        (~1000 tokens each). Limited to 20 activities maximum.

        Args:
            start: Offset of the first activity (default: 0)
            limit: Number of activities (default: 10, max: 20)
            activitytype: Filter by activity type (e.g. "running", "cycling")
            simplify: If true (default), returns only essential fields for
                analysis (~200 tokens/activity). If false, returns full
                activity data (~1000 tokens/activity)

        Returns:
            JSON list of activities
        """
        return gateway.run(
            "get_activities",
            compact(start=start, limit=limit, activitytype=activitytype, simplify=simplify),
        )

    @app.tool()
    async def get_last_activity() -> str:
        """Get the most recent activity."""
        return gateway.run("get_last_activity", {})

    @app.tool()
    async def get_activities_by_date(
        startdate: str,
        enddate: str,
        activitytype: str | None = None,
        sortorder: Literal["asc", "desc"] | None = None,
    ) -> str:
        """
        Get activities within a date range.

        Args:
            startdate: Start date in YYYY-MM-DD format
            enddate: End date in YYYY-MM-DD format
            activitytype: Filter by activity type (optional)
            sortorder: "asc" or "desc" (optional)
        """
        return gateway.run(
            "get_activities_by_date",
            compact(
                startdate=startdate,
                enddate=enddate,
                activitytype=activitytype,
                sortorder=sortorder,
            ),
        )

    @app.tool()
    async def get_activity(activity_id: int | str) -> str:
        """
        Get a specific activity by ID.

        Args:
            activity_id: Activity ID from get_activities
        """
        return gateway.run("get_activity", {"activity_id": activity_id})

    @app.tool()
    async def get_activity_details(
        activity_id: int | str,
        maxchart: int = 2000,
        maxpoly: int = 4000,
    ) -> str:
        """
        Get comprehensive activity details.

        Includes chart samples (heart rate, pace, cadence, elevation) and the
        GPS polyline, capped by maxchart and maxpoly.

        Args:
            activity_id: Activity ID from get_activities
            maxchart: Maximum number of chart samples (default: 2000)
            maxpoly: Maximum number of polyline points (default: 4000)
        """
        return gateway.run(
            "get_activity_details",
            compact(activity_id=activity_id, maxchart=maxchart, maxpoly=maxpoly),
        )

    @app.tool()
    async def get_activities_fordate(date: str) -> str:
        """
        Get activities for a specific date.

        Args:
            date: Date in YYYY-MM-DD format
        """
        return gateway.run("get_activities_fordate", {"date": date})

    return app
