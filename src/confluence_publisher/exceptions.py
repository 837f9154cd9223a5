"""Exceptions raised by the Confluence publisher."""

from mcp.shared.exceptions import McpError
from mcp.types import METHOD_NOT_FOUND, ErrorData


class ConfluencePublisherError(Exception):
    """Base class for domain errors that are reported in a tool envelope."""


class ConfigurationError(ConfluencePublisherError):
    """Raised when required Confluence configuration is missing."""

    def __init__(self, missing: list[str]):
        self.missing = list(missing)
        super().__init__(
            "Missing required Confluence configuration: " + ", ".join(self.missing)
        )


class RemoteApiError(ConfluencePublisherError):
    """Raised when a call to the Confluence REST API fails.

    Covers both non-2xx responses and transport level failures. The message
    carries the detail reported by Confluence when one is available.
    """

    def __init__(self, detail: str, status_code: int | None = None):
        self.detail = detail
        self.status_code = status_code
        super().__init__(f"Confluence API error: {detail}")


class LocalIOError(ConfluencePublisherError):
    """Raised when a Markdown source cannot be read or an export cannot be written."""


class InvalidToolArgumentsError(ConfluencePublisherError):
    """Raised when a tool is called with missing or mistyped arguments."""


class ProtocolError(McpError):
    """Raised for an unknown tool name.

    A protocol level fault: it is not a ConfluencePublisherError and never
    ends up in a tool envelope.
    """

    def __init__(self, tool_name: str):
        self.tool_name = tool_name
        super().__init__(
            ErrorData(code=METHOD_NOT_FOUND, message=f"Unknown tool: {tool_name}")
        )
