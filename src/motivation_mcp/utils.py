"""Error handling utilities for the Motivation Playlist MCP Server.

Tool execution failures are reported to the client as error-flagged tool
output rather than protocol errors; only routing failures (unknown tool or
resource) surface as JSON-RPC errors.
"""

import json
import logging
from typing import Any, Awaitable, Callable

import httpx
import mcp.types as types

from .exceptions import AuthError, UpstreamError, ValidationError

logger = logging.getLogger(__name__)


def text_result(text: str, is_error: bool = False) -> types.CallToolResult:
    return types.CallToolResult(
        content=[types.TextContent(type="text", text=text)],
        isError=is_error,
    )


def to_json(data: Any) -> str:
    """Serialize resource contents as indented JSON."""
    return json.dumps(data, indent=2, ensure_ascii=False)


async def safe_tool_execution(
    tool_name: str,
    handler: Callable[[dict[str, Any]], Awaitable[str]],
    arguments: dict[str, Any],
    error_prefix: str = "Error executing tool",
) -> types.CallToolResult:
    """Execute tool with error handling.

    Args:
        tool_name: Name of the tool being executed
        handler: Async function returning the tool's text output
        arguments: Raw tool arguments
        error_prefix: Lead-in for execution failure messages

    Returns:
        types.CallToolResult: Tool output, with isError set on failure
    """
    try:
        text = await handler(arguments)
        return text_result(text)

    except ValidationError as e:
        logger.warning(f"Invalid arguments for {tool_name}: {e}")
        return text_result(f"Invalid arguments: {e}", is_error=True)

    except AuthError as e:
        logger.error(f"Authentication failed in {tool_name}: {e}")
        return text_result(f"{error_prefix}: {e}", is_error=True)

    except UpstreamError as e:
        logger.error(f"{e.service} error in {tool_name}: {e}")
        return text_result(f"{error_prefix}: {e}", is_error=True)

    except httpx.HTTPError as e:
        logger.error(f"Network error in {tool_name}: {e}")
        return text_result(f"{error_prefix}: {e}", is_error=True)

    except Exception as e:
        logger.exception(f"Unexpected error in {tool_name}")
        return text_result(f"{error_prefix}: {e}", is_error=True)
