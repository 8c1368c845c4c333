"""Test suite for the Motivation Playlist MCP Server.

All tests use mocked Asana and Spotify clients (or mocked HTTP transports) to
avoid depending on the real services.
"""
