"""Test configuration and shared fixtures for Motivation Playlist MCP Server tests."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from motivation_mcp.config import MotivationConfig
from motivation_mcp.models import PlaylistHandle, Task, Track
from motivation_mcp.state import PlaylistState
from motivation_mcp.workflow import PlaylistWorkflow

REQUIRED_ENV = {
    "ASANA_ACCESS_TOKEN": "asana-token",
    "ASANA_PROJECT_ID": "1200000000000001",
    "SPOTIFY_CLIENT_ID": "spotify-client-id",
    "SPOTIFY_CLIENT_SECRET": "spotify-client-secret",
    "SPOTIFY_REFRESH_TOKEN": "spotify-refresh-token",
}

OPTIONAL_ENV = (
    "ASANA_API_URL",
    "SPOTIFY_REDIRECT_URI",
    "MOTIVATION_HTTP_TIMEOUT",
    "MOTIVATION_LOG_LEVEL",
    "MOTIVATION_LOG_FILE",
)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every variable the server reads."""
    for var in (*REQUIRED_ENV, *OPTIONAL_ENV):
        monkeypatch.delenv(var, raising=False)
    return monkeypatch


@pytest.fixture
def required_env(clean_env):
    """Set all required environment variables."""
    for var, value in REQUIRED_ENV.items():
        clean_env.setenv(var, value)
    return clean_env


@pytest.fixture
def config():
    return MotivationConfig(
        asana_access_token="asana-token",
        asana_project_id="1200000000000001",
        spotify_client_id="spotify-client-id",
        spotify_client_secret="spotify-client-secret",
        spotify_refresh_token="spotify-refresh-token",
    )


@pytest.fixture
def sample_tasks():
    """Three overdue Asana tasks."""
    return [
        Task(gid="1", name="Write quarterly report", resource_type="task", resource_subtype="default_task"),
        Task(gid="2", name="Fix login bug", resource_type="task", resource_subtype="default_task"),
        Task(gid="3", name="Launch review", resource_type="task", resource_subtype="milestone"),
    ]


@pytest.fixture
def sample_tracks():
    return [
        Track(uri=f"spotify:track:{i}", id=str(i), name=f"Song {i}", artists=("Artist",))
        for i in range(10)
    ]


@pytest.fixture
def sample_playlist():
    return PlaylistHandle(id="playlist-001", external_url="https://open.spotify.com/playlist/playlist-001")


@pytest.fixture
def mock_asana_client(sample_tasks):
    """Mocked AsanaClient returning sample_tasks."""
    client = MagicMock()
    client.fetch_overdue_tasks = AsyncMock(return_value=sample_tasks)
    client.aclose = AsyncMock()
    return client


@pytest.fixture
def mock_spotify_client(sample_tracks, sample_playlist):
    """Mocked SpotifyClient with a successful happy path."""
    client = MagicMock()
    client.refresh_access_token = AsyncMock()
    client.get_recommendations = AsyncMock(return_value=sample_tracks)
    client.create_playlist = AsyncMock(return_value=sample_playlist)
    client.add_tracks_to_playlist = AsyncMock()
    return client


@pytest.fixture
def state():
    return PlaylistState()


@pytest.fixture
def workflow(mock_asana_client, mock_spotify_client, state):
    return PlaylistWorkflow(mock_asana_client, mock_spotify_client, state)
