"""
Tests for Garmin workout tools.

Tools are thin wrappers: they forward arguments to the gateway and return
the remote JSON. These tests verify endpoint routing and request bodies.
"""
import json
import pytest
from mcp.server.fastmcp.exceptions import ToolError

from garmin_connect_mcp import workouts
from tests.conftest import create_test_app, get_tool_result_text, make_response, sent_request


WORKOUT = {
    "workoutName": "6x800m",
    "sportType": {"sportTypeId": 1, "sportTypeKey": "running"},
    "workoutSegments": [{
        "segmentOrder": 1,
        "sportType": {"sportTypeId": 1, "sportTypeKey": "running"},
        "workoutSteps": [{
            "type": "RepeatGroupDTO",
            "stepOrder": 1,
            "stepType": {"stepTypeId": 6, "stepTypeKey": "repeat"},
            "numberOfIterations": 6,
            "workoutSteps": [{
                "type": "ExecutableStepDTO",
                "stepOrder": 1,
                "stepType": {"stepTypeId": 3, "stepTypeKey": "interval"},
                "endCondition": {"conditionTypeId": 3, "conditionTypeKey": "distance"},
                "endConditionValue": 800,
            }],
        }],
    }],
}


@pytest.fixture
def app_with_workouts(gateway):
    """Create FastMCP app with workout tools registered."""
    return create_test_app(workouts, gateway)


@pytest.mark.asyncio
async def test_upload_workout(app_with_workouts, mock_session):
    mock_session.post.return_value = make_response(200, {"workoutId": 987, "success": True})

    result = await app_with_workouts.call_tool("upload_workout", {"workout_json": WORKOUT})

    data = json.loads(get_tool_result_text(result))
    assert data["workoutId"] == 987

    url, _, body = sent_request(mock_session)
    assert url.endswith("/api/workout/upload_workout")
    assert body == {"workout_json": WORKOUT, "auto_clean": True}


@pytest.mark.asyncio
async def test_upload_workout_auto_clean(app_with_workouts, mock_session):
    await app_with_workouts.call_tool(
        "upload_workout",
        {"workout_json": WORKOUT, "auto_clean": False},
    )

    _, _, body = sent_request(mock_session)
    assert body["auto_clean"] is False


@pytest.mark.asyncio
async def test_get_workouts_sends_default_paging(app_with_workouts, mock_session):
    await app_with_workouts.call_tool("get_workouts", {})

    url, _, body = sent_request(mock_session)
    assert url.endswith("/api/workout/get_workouts")
    assert body == {"start": 0, "limit": 10}


@pytest.mark.asyncio
async def test_get_workouts_advertises_defaults(app_with_workouts):
    tools = {tool.name: tool for tool in await app_with_workouts.list_tools()}

    properties = tools["get_workouts"].inputSchema["properties"]
    assert properties["start"]["default"] == 0
    assert properties["limit"]["default"] == 10
    assert properties["limit"]["type"] == "integer"


@pytest.mark.asyncio
async def test_get_workouts_with_paging(app_with_workouts, mock_session):
    await app_with_workouts.call_tool("get_workouts", {"start": 10, "limit": 5})

    _, _, body = sent_request(mock_session)
    assert body == {"start": 10, "limit": 5}


@pytest.mark.asyncio
async def test_get_workout_by_id(app_with_workouts, mock_session):
    mock_session.post.return_value = make_response(200, {"workoutId": 12345})

    result = await app_with_workouts.call_tool("get_workout_by_id", {"workout_id": 12345})

    assert json.loads(get_tool_result_text(result)) == {"workoutId": 12345}
    url, _, body = sent_request(mock_session)
    assert url.endswith("/api/workout/get_workout_by_id")
    assert body == {"workout_id": 12345}


@pytest.mark.asyncio
async def test_prepare_workout(app_with_workouts, mock_session):
    await app_with_workouts.call_tool("prepare_workout", {"workout_json": WORKOUT})

    url, _, body = sent_request(mock_session)
    assert url.endswith("/api/workout/prepare_workout")
    assert body == {"workout_json": WORKOUT}


@pytest.mark.asyncio
async def test_upload_workout_rejected(app_with_workouts, mock_session):
    mock_session.post.return_value = make_response(
        422, {"detail": "endConditionValue is required"}
    )

    with pytest.raises(ToolError) as exc_info:
        await app_with_workouts.call_tool("upload_workout", {"workout_json": WORKOUT})

    assert "422" in str(exc_info.value)
    assert "endConditionValue is required" in str(exc_info.value)


@pytest.mark.asyncio
async def test_upload_workout_describes_step_structure(app_with_workouts):
    tools = {tool.name: tool for tool in await app_with_workouts.list_tools()}

    description = tools["upload_workout"].description
    assert "ExecutableStepDTO" in description
    assert "RepeatGroupDTO" in description
    assert "pace.zone" in description
    assert tools["upload_workout"].inputSchema["required"] == ["workout_json"]


def test_workout_tools_registered(app_with_workouts):
    tools = app_with_workouts._tool_manager._tools
    assert sorted(tools.keys()) == [
        "get_workout_by_id",
        "get_workouts",
        "prepare_workout",
        "upload_workout",
    ]
