"""
Workout tools for the Garmin Connect MCP client.

Upload, prepare and list structured workouts. Workout JSON is passed
through to the remote API, which cleans and validates it.
"""

from garmin_connect_mcp.gateway import ToolGateway


def register_tools(app, gateway: ToolGateway):
    """Register workout tools with the MCP app."""

    @app.tool()
    async def upload_workout(workout_json: dict | str, auto_clean: bool = True) -> str:
        """
        Upload a workout to Garmin Connect.

        The workout is a Garmin workout JSON object (or its string form):

            {
              "workoutName": "6x800m Intervals",
              "sportType": {"sportTypeId": 1, "sportTypeKey": "running"},
              "workoutSegments": [{
                "segmentOrder": 1,
                "sportType": {"sportTypeId": 1, "sportTypeKey": "running"},
                "workoutSteps": [ ...steps... ]
              }]
            }

        Steps are either an ExecutableStepDTO or a RepeatGroupDTO:

        ExecutableStepDTO:
            {
              "type": "ExecutableStepDTO",
              "stepOrder": 1,
              "stepType": {"stepTypeId": 1, "stepTypeKey": "warmup"},
              "endCondition": {"conditionTypeId": 2, "conditionTypeKey": "time"},
              "endConditionValue": 900,
              "targetType": {"workoutTargetTypeId": 1, "workoutTargetTypeKey": "no.target"}
            }

            Step types: 1 warmup, 2 cooldown, 3 interval, 4 recovery, 5 rest, 6 repeat
            End conditions:
                1 "lap.button" (endConditionValue omitted)
                2 "time" (endConditionValue in seconds)
                3 "distance" (endConditionValue in meters)
            Targets:
                1 "no.target"
                4 "heart.rate.zone" (zoneNumber 1-5, or targetValueOne/Two in bpm)
                6 "pace.zone" (targetValueOne/Two as speed in m/s)

        Pace targets are speeds, not paces: speed_m_s = 1000 / pace_seconds_per_km.
        For 5:00-5:30/km use targetValueOne = 1000/330 = 3.03 (slower bound)
        and targetValueTwo = 1000/300 = 3.33 (faster bound).

        RepeatGroupDTO:
            {
              "type": "RepeatGroupDTO",
              "stepOrder": 2,
              "stepType": {"stepTypeId": 6, "stepTypeKey": "repeat"},
              "numberOfIterations": 6,
              "smartRepeat": false,
              "workoutSteps": [ ...ExecutableStepDTO children, stepOrder restarting at 1... ]
            }

        Args:
            workout_json: Workout JSON object or string
            auto_clean: Automatically clean the workout before upload (default: true)

        Returns:
            JSON with the created workout
        """
        return gateway.run(
            "upload_workout",
            {"workout_json": workout_json, "auto_clean": auto_clean},
        )

    @app.tool()
    async def get_workouts(start: int = 0, limit: int = 10) -> str:
        """
        Get list of workouts.

        Args:
            start: Offset of the first workout (default: 0)
            limit: Maximum number of workouts (default: 10)
        """
        return gateway.run("get_workouts", {"start": start, "limit": limit})

    @app.tool()
    async def get_workout_by_id(workout_id: int | str) -> str:
        """Get a workout by ID."""
        return gateway.run("get_workout_by_id", {"workout_id": workout_id})

    @app.tool()
    async def prepare_workout(workout_json: dict | str) -> str:
        """
        Prepare a workout for upload by cleaning it.

        Returns the cleaned workout JSON without uploading it, so it can be
        reviewed before calling upload_workout. Accepts the same structure
        as upload_workout.

        Args:
            workout_json: Workout JSON to clean
        """
        return gateway.run("prepare_workout", {"workout_json": workout_json})

    return app
