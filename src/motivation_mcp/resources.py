"""MCP Resources Registry - overdue tasks and latest playlist."""

import mcp.types as types
from mcp.shared.exceptions import McpError

from .asana import AsanaClient
from .state import PlaylistState
from .utils import to_json

OVERDUE_TASKS_URI = "motivation://tasks/overdue"
LATEST_PLAYLIST_URI = "motivation://playlist/latest"

OVERDUE_TASKS_LIMIT = 10


class ResourceRegistry:
    """Registry for the server's MCP resources.

    Provides 2 resources:
        1. motivation://tasks/overdue - Up to 10 overdue tasks, fetched fresh
        2. motivation://playlist/latest - Metadata of the last generated playlist
    """

    def __init__(self, asana: AsanaClient, state: PlaylistState):
        """Initialize resource registry.

        Args:
            asana: Asana client used for the overdue tasks resource
            state: Last generated playlist record
        """
        self.asana = asana
        self.state = state
        self.resources = self._define_resources()

    def _define_resources(self) -> dict[str, types.Resource]:
        return {
            OVERDUE_TASKS_URI: types.Resource(
                uri=OVERDUE_TASKS_URI,
                name="Overdue Tasks",
                description="List of current overdue tasks",
                mimeType="application/json",
            ),
            LATEST_PLAYLIST_URI: types.Resource(
                uri=LATEST_PLAYLIST_URI,
                name="Latest Generated Playlist",
                description="Information about the most recently generated playlist",
                mimeType="application/json",
            ),
        }

    def get_all(self) -> list[types.Resource]:
        """Get all resource definitions."""
        return list(self.resources.values())

    async def read(self, uri: str) -> str:
        """Read a resource by URI.

        Args:
            uri: Resource URI

        Returns:
            Resource contents as JSON text

        Raises:
            McpError: INTERNAL_ERROR if no playlist has been generated yet,
                INVALID_REQUEST for an unknown URI
        """
        uri = str(uri)
        if uri == OVERDUE_TASKS_URI:
            return await self._read_overdue_tasks()
        if uri == LATEST_PLAYLIST_URI:
            return self._read_latest_playlist()

        raise McpError(
            types.ErrorData(code=types.INVALID_REQUEST, message=f"Unknown resource: {uri}")
        )

    # Resource handler methods (private)

    async def _read_overdue_tasks(self) -> str:
        tasks = await self.asana.fetch_overdue_tasks(OVERDUE_TASKS_LIMIT)
        return to_json([task.to_dict() for task in tasks])

    def _read_latest_playlist(self) -> str:
        latest = self.state.latest
        if latest is None:
            raise McpError(
                types.ErrorData(
                    code=types.INTERNAL_ERROR, message="No playlist has been generated yet"
                )
            )
        return to_json(latest.to_dict())
