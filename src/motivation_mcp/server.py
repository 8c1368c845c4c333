"""Main MCP Server class with stdio transport.

This module implements the MotivationServer class that wires configuration,
the Asana and Spotify clients, the playlist state and the tool/resource
registries into an MCP server, and the command-line entry point that runs it.
"""

import argparse
import asyncio
import logging
import sys
from typing import Any, Optional

import mcp.server.stdio
import mcp.types as types
from mcp.server import Server
from mcp.server.lowlevel.helper_types import ReadResourceContents
from pydantic import AnyUrl

from . import __version__
from .asana import AsanaClient
from .config import MotivationConfig
from .exceptions import ConfigurationError
from .logger import setup_logging
from .resources import ResourceRegistry
from .spotify import SpotifyClient
from .state import PlaylistState
from .tools import ToolRegistry
from .workflow import PlaylistWorkflow

logger = logging.getLogger(__name__)

SERVER_NAME = "motivation-playlist-server"


class MotivationServer:
    """Main MCP server class coordinating tools and resources.

    This class:
    - Loads and validates MotivationConfig once, before serving anything
    - Owns the last generated playlist state and hands it to the registries
    - Registers 1 tool and 2 resources
    - Provides stdio transport
    """

    def __init__(
        self,
        config: Optional[MotivationConfig] = None,
        asana: Optional[AsanaClient] = None,
        spotify: Optional[SpotifyClient] = None,
    ):
        """Initialize MCP server with upstream clients and registries.

        Args:
            config: Server configuration, loaded from the environment if omitted
            asana: Optional preconfigured Asana client
            spotify: Optional preconfigured Spotify client

        Raises:
            ConfigurationError: If required configuration is missing
        """
        self.config = config or MotivationConfig.from_environment()

        self.asana = asana or AsanaClient.from_config(self.config)
        self.spotify = spotify or SpotifyClient.from_config(self.config)
        self.state = PlaylistState()

        workflow = PlaylistWorkflow(self.asana, self.spotify, self.state)
        self.tool_registry = ToolRegistry(workflow)
        self.resource_registry = ResourceRegistry(self.asana, self.state)

        self.server = Server(SERVER_NAME, version=__version__)
        self._register_handlers()

        logger.info("Motivation Playlist MCP Server initialized")

    def _register_handlers(self):
        """Register all MCP protocol handlers."""

        @self.server.list_tools()
        async def list_tools() -> list[types.Tool]:
            tools = self.tool_registry.get_all()
            logger.info(f"Listing {len(tools)} tools")
            return tools

        # The call_tool() decorator reports every exception as tool output, so
        # the handler is installed directly to let METHOD_NOT_FOUND reach the client.
        async def call_tool(request: types.CallToolRequest) -> types.ServerResult:
            return types.ServerResult(
                await self.call_tool(request.params.name, request.params.arguments)
            )

        self.server.request_handlers[types.CallToolRequest] = call_tool

        @self.server.list_resources()
        async def list_resources() -> list[types.Resource]:
            resources = self.resource_registry.get_all()
            logger.info(f"Listing {len(resources)} resources")
            return resources

        @self.server.read_resource()
        async def read_resource(uri: AnyUrl) -> list[ReadResourceContents]:
            text = await self.read_resource(str(uri))
            return [ReadResourceContents(content=text, mime_type="application/json")]

    async def call_tool(
        self, name: str, arguments: Optional[dict[str, Any]]
    ) -> types.CallToolResult:
        """Execute a tool by name."""
        logger.info(f"Executing tool: {name} with args: {arguments}")
        return await self.tool_registry.call_tool(name, arguments)

    async def read_resource(self, uri: str) -> str:
        """Read a resource by URI."""
        logger.info(f"Reading resource: {uri}")
        return await self.resource_registry.read(uri)

    async def run(self):
        """Run the MCP server with stdio transport."""
        logger.info("Starting Motivation Playlist MCP Server with stdio transport")

        try:
            async with mcp.server.stdio.stdio_server() as (read_stream, write_stream):
                await self.server.run(
                    read_stream,
                    write_stream,
                    self.server.create_initialization_options(),
                )
        finally:
            await self.asana.aclose()


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="motivation-mcp",
        description="MCP server that builds Spotify playlists from overdue Asana tasks",
        epilog="Configuration is read from ASANA_* and SPOTIFY_* environment variables.",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        default=None,
        help="Log level (default: MOTIVATION_LOG_LEVEL or INFO)",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def cli(argv: Optional[list[str]] = None) -> int:
    """Command-line entry point.

    Returns:
        Exit code: 0 on clean shutdown, 1 on configuration error
    """
    args = create_parser().parse_args(argv)
    setup_logging(level=args.log_level)

    try:
        server = MotivationServer()
    except ConfigurationError as e:
        logger.critical(f"Cannot start server: {e}")
        return 1

    asyncio.run(server.run())
    return 0


if __name__ == "__main__":
    sys.exit(cli())
