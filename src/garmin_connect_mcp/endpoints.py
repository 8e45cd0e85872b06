"""
Tool name to remote endpoint mapping.

Every registered MCP tool forwards to exactly one path of the form
/api/{category}/{tool_name}.
"""

from types import MappingProxyType

# Category path segments on the remote API
WORKOUT = "workout"
ACTIVITIES = "activities"
HEALTH = "health"
PERFORMANCE = "performance"

TOOL_CATEGORIES = MappingProxyType({
    WORKOUT: (
        "upload_workout",
        "get_workouts",
        "get_workout_by_id",
        "prepare_workout",
    ),
    ACTIVITIES: (
        "get_activities",
        "get_last_activity",
        "get_activities_by_date",
        "get_activity",
        "get_activity_details",
        "get_activities_fordate",
    ),
    HEALTH: (
        "get_daily_summary",
        "get_heart_rate_data",
        "get_sleep_data",
        "get_stress_data",
        "get_body_battery",
        "get_resting_heart_rate",
        "get_hrv_data",
        "get_training_readiness",
        "get_steps_data",
        "get_respiration_data",
        "get_spo2_data",
    ),
    PERFORMANCE: (
        "get_max_metrics",
        "get_training_status",
        "get_endurance_score",
        "get_race_predictions",
    ),
})

TOOL_ENDPOINTS = MappingProxyType({
    tool_name: f"/api/{category}/{tool_name}"
    for category, tool_names in TOOL_CATEGORIES.items()
    for tool_name in tool_names
})


def get_endpoint(tool_name: str) -> str:
    """Return the endpoint path for a tool, or None if the tool is unknown."""
    return TOOL_ENDPOINTS.get(tool_name)
