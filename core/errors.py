from __future__ import annotations


class ToolError(Exception):
    """Base for every failure a tool call can report back to the caller."""

    kind = "tool_error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotConnectedError(ToolError):
    kind = "not_connected"

    def __init__(self, message: str = "Not connected to MCP server") -> None:
        super().__init__(message)


class NotFoundError(ToolError):
    kind = "not_found"


class UnknownToolError(ToolError):
    kind = "unknown_tool"

    def __init__(self, tool_name: str) -> None:
        super().__init__(f"Unknown tool: {tool_name}")
        self.tool_name = tool_name


class InvalidArgumentsError(ToolError):
    kind = "invalid_arguments"


class UnderlyingIOError(ToolError):
    kind = "io_failure"


class ToolCatalogError(Exception):
    """Loaded tool modules do not match the published catalog."""


def from_os_error(e: OSError) -> ToolError:
    msg = e.strerror or str(e)
    if e.filename is not None:
        msg = f"{msg}: {e.filename}"
    if isinstance(e, FileNotFoundError):
        return NotFoundError(msg)
    return UnderlyingIOError(msg)
