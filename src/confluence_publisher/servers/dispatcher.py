"""Tool dispatcher: routes tool calls and shapes their results.

Every tool call goes through `call_tool`, which:

1. rejects unknown tool names with a ProtocolError,
2. obtains the shared ConfluenceFetcher, so missing configuration is reported first,
3. validates the loosely typed argument bag against the tool's argument model
   and runs the tool handler,
4. wraps the outcome into a `{"status": "success" | "error", ...}` envelope.

Only ProtocolError escapes; every other failure ends up in the envelope.
The tool functions hand error envelopes to FastMCP as a ToolError so the MCP
result is flagged with isError.
"""

import json
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from fastmcp.exceptions import ToolError
from pydantic import ValidationError

from confluence_publisher.confluence import ConfluenceFetcher
from confluence_publisher.exceptions import (
    ConfluencePublisherError,
    InvalidToolArgumentsError,
    ProtocolError,
)
from confluence_publisher.models.tools import ToolArguments

from .dependencies import get_confluence_fetcher

logger = logging.getLogger("confluence-publisher.servers.dispatcher")

ToolHandler = Callable[[ConfluenceFetcher, Any], dict[str, Any]]


@dataclass(frozen=True)
class RegisteredTool:
    name: str
    arguments_model: type[ToolArguments]
    handler: ToolHandler
    writes: bool = False


_registry: dict[str, RegisteredTool] = {}


def register_tool(
    name: str, arguments_model: type[ToolArguments], *, writes: bool = False
) -> Callable[[ToolHandler], ToolHandler]:
    """Register a handler under a tool name.

    Args:
        name: Tool name as published to the agent
        arguments_model: Model used to validate the tool arguments
        writes: Whether the tool modifies Confluence (disabled in read-only mode)
    """

    def decorator(handler: ToolHandler) -> ToolHandler:
        _registry[name] = RegisteredTool(
            name=name, arguments_model=arguments_model, handler=handler, writes=writes
        )
        return handler

    return decorator


def get_registered_tools() -> dict[str, RegisteredTool]:
    return dict(_registry)


def success_envelope(result: dict[str, Any]) -> dict[str, Any]:
    return {"status": "success", **result}


def error_envelope(message: str) -> dict[str, Any]:
    return {"status": "error", "error": message}


def to_tool_text(envelope: dict[str, Any]) -> str:
    """Serialize an envelope as the text content returned to the agent."""
    return json.dumps(envelope, indent=2, ensure_ascii=False)


def to_tool_result(envelope: dict[str, Any]) -> str:
    """Return a success envelope as tool text.

    Raises:
        ToolError: For an error envelope, carrying the same JSON text, so
            FastMCP marks the result with isError
    """
    text = to_tool_text(envelope)
    if envelope.get("status") == "error":
        raise ToolError(text)
    return text


def parse_tool_arguments(tool: RegisteredTool, arguments: Any) -> ToolArguments:
    """Validate raw tool arguments.

    Raises:
        InvalidToolArgumentsError: If the arguments are not an object, or a
            required field is missing or has the wrong type
    """
    if arguments is None:
        arguments = {}
    if not isinstance(arguments, dict):
        raise InvalidToolArgumentsError(
            f"Invalid arguments for {tool.name}: expected an object, "
            f"got {type(arguments).__name__}"
        )

    try:
        return tool.arguments_model.model_validate(arguments)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in error['loc']) or 'arguments'}: {error['msg']}"
            for error in e.errors()
        )
        raise InvalidToolArgumentsError(
            f"Invalid arguments for {tool.name}: {problems}"
        ) from e


async def call_tool(name: str, arguments: dict[str, Any] | None) -> dict[str, Any]:
    """Run a tool and return its envelope.

    Args:
        name: Tool name
        arguments: Raw tool arguments as received from the agent

    Returns:
        The success or error envelope

    Raises:
        ProtocolError: If no tool is registered under `name`
    """
    tool = _registry.get(name)
    if tool is None:
        logger.warning(f"Call to unknown tool '{name}'")
        raise ProtocolError(name)

    logger.debug(f"call_tool: {name}")
    try:
        fetcher = get_confluence_fetcher()
        parsed = parse_tool_arguments(tool, arguments)
        if tool.writes and fetcher.config.read_only:
            raise ConfluencePublisherError(
                f"Cannot perform {name}: the server is running in read-only mode"
            )
        result = tool.handler(fetcher, parsed)
    except ConfluencePublisherError as e:
        logger.error(f"Tool {name} failed: {e}")
        return error_envelope(str(e))
    except Exception as e:
        # Unexpected failures are reported to the agent rather than raised
        logger.error(f"Tool {name} failed unexpectedly: {e}", exc_info=True)
        return error_envelope(str(e) or "Unknown error occurred")

    return success_envelope(result)
