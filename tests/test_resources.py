"""Contract tests for the overdue tasks and latest playlist resources."""

import json

import mcp.types as types
import pytest
from mcp.shared.exceptions import McpError

from motivation_mcp.exceptions import UpstreamError
from motivation_mcp.resources import LATEST_PLAYLIST_URI, OVERDUE_TASKS_URI, ResourceRegistry


@pytest.fixture
def registry(mock_asana_client, state):
    return ResourceRegistry(mock_asana_client, state)


def test_registry_lists_two_resources(registry):
    resources = registry.get_all()

    assert [str(resource.uri) for resource in resources] == [
        "motivation://tasks/overdue",
        "motivation://playlist/latest",
    ]
    assert [resource.name for resource in resources] == ["Overdue Tasks", "Latest Generated Playlist"]
    assert all(resource.mimeType == "application/json" for resource in resources)


@pytest.mark.asyncio
async def test_overdue_tasks_are_fetched_fresh(registry, mock_asana_client, sample_tasks):
    first = json.loads(await registry.read(OVERDUE_TASKS_URI))
    await registry.read(OVERDUE_TASKS_URI)

    assert first == [task.to_dict() for task in sample_tasks]
    assert mock_asana_client.fetch_overdue_tasks.await_count == 2
    mock_asana_client.fetch_overdue_tasks.assert_awaited_with(10)


@pytest.mark.asyncio
async def test_overdue_tasks_upstream_failure_propagates(registry, mock_asana_client):
    mock_asana_client.fetch_overdue_tasks.side_effect = UpstreamError("asana", 500, "Server Error")

    with pytest.raises(UpstreamError):
        await registry.read(OVERDUE_TASKS_URI)


@pytest.mark.asyncio
async def test_latest_playlist_before_generation_is_internal_error(registry):
    with pytest.raises(McpError) as exc_info:
        await registry.read(LATEST_PLAYLIST_URI)

    assert exc_info.value.error.code == types.INTERNAL_ERROR
    assert exc_info.value.error.message == "No playlist has been generated yet"


@pytest.mark.asyncio
async def test_latest_playlist_after_generation(registry, state):
    await state.record("https://open.spotify.com/playlist/pl-1", 4)

    data = json.loads(await registry.read(LATEST_PLAYLIST_URI))

    assert set(data) == {"playlistUrl", "taskCount", "generatedAt"}
    assert data["playlistUrl"] == "https://open.spotify.com/playlist/pl-1"
    assert data["taskCount"] == 4


@pytest.mark.asyncio
async def test_latest_playlist_reflects_most_recent_record(registry, state):
    await state.record("https://open.spotify.com/playlist/pl-1", 4)
    await state.record("https://open.spotify.com/playlist/pl-2", 2)

    data = json.loads(await registry.read(LATEST_PLAYLIST_URI))

    assert data["playlistUrl"] == "https://open.spotify.com/playlist/pl-2"
    assert data["taskCount"] == 2


@pytest.mark.asyncio
async def test_unknown_resource_is_invalid_request(registry):
    with pytest.raises(McpError) as exc_info:
        await registry.read("motivation://unknown")

    assert exc_info.value.error.code == types.INVALID_REQUEST
    assert "Unknown resource: motivation://unknown" in exc_info.value.error.message
