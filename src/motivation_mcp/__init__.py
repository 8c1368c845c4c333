"""Motivation Playlist MCP Server - turn overdue Asana tasks into a Spotify playlist.

This package provides a Model Context Protocol (MCP) server that reads a user's
overdue tasks from Asana and builds a Spotify playlist to power through them.

Components:
    - server.py: Main MCP server class with stdio transport
    - tools.py: The generate_motivation_playlist tool
    - resources.py: Overdue tasks and latest playlist resources
    - workflow.py: Playlist generation workflow
    - asana.py / spotify.py: Upstream API clients
    - state.py: In-memory record of the last generated playlist
    - utils.py: Error handling for tool execution
"""

__version__ = "1.0.0"
