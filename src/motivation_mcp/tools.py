"""MCP Tools Registry - the generate_motivation_playlist tool."""

from typing import Any

import mcp.types as types
from mcp.shared.exceptions import McpError

from .models import GeneratePlaylistArgs
from .utils import safe_tool_execution
from .workflow import GenerationResult, PlaylistWorkflow

GENERATE_MOTIVATION_PLAYLIST = "generate_motivation_playlist"

NO_TASKS_MESSAGE = "No overdue tasks found! Time to celebrate! 🎉"


def format_generation_result(result: GenerationResult) -> str:
    """Render a workflow result as the tool's text output."""
    if result.playlist is None:
        return NO_TASKS_MESSAGE

    task_lines = "\n".join(f"- {task.name}" for task in result.tasks)
    return (
        "Created motivation playlist! 🎵\n\n"
        f"Tasks to complete:\n{task_lines}\n\n"
        f"Playlist URL: {result.playlist.external_url}"
    )


class ToolRegistry:
    """Registry for the server's MCP tools.

    Provides one tool:
        generate_motivation_playlist - Build a Spotify playlist from overdue Asana tasks
    """

    def __init__(self, workflow: PlaylistWorkflow):
        """Initialize tool registry.

        Args:
            workflow: Playlist generation workflow
        """
        self.workflow = workflow
        self.tools = self._define_tools()
        self._handlers = {
            GENERATE_MOTIVATION_PLAYLIST: (
                self._generate_motivation_playlist,
                "Error generating playlist",
            ),
        }

    def _define_tools(self) -> dict[str, types.Tool]:
        return {
            GENERATE_MOTIVATION_PLAYLIST: types.Tool(
                name=GENERATE_MOTIVATION_PLAYLIST,
                description="Generate a Spotify playlist based on overdue tasks",
                inputSchema=GeneratePlaylistArgs.json_schema(),
            ),
        }

    def get_all(self) -> list[types.Tool]:
        """Get all tool definitions."""
        return list(self.tools.values())

    async def call_tool(self, name: str, arguments: dict[str, Any] | None) -> types.CallToolResult:
        """Execute a tool by name.

        Execution failures come back as error-flagged tool output.

        Raises:
            McpError: METHOD_NOT_FOUND if no tool has this name
        """
        if name not in self._handlers:
            raise McpError(
                types.ErrorData(code=types.METHOD_NOT_FOUND, message=f"Unknown tool: {name}")
            )

        handler, error_prefix = self._handlers[name]
        return await safe_tool_execution(name, handler, arguments or {}, error_prefix=error_prefix)

    # Tool handler methods (private)

    async def _generate_motivation_playlist(self, arguments: dict[str, Any]) -> str:
        """Validate arguments, run the workflow and render its result."""
        args = GeneratePlaylistArgs.from_arguments(arguments)
        result = await self.workflow.generate(args)
        return format_generation_result(result)
