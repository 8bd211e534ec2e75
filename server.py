import logging

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError as MCPToolError
from fastmcp.server.middleware import Middleware, MiddlewareContext

from core.config import MCP_TRANSPORT, SERVICE_NAME, VERSION, setup_logging
from core.results import ToolResult
from tools import TOOL_SPECS, dispatch
from tools.catalog import check_call

logger = logging.getLogger(__name__)


class CallCheckMiddleware(Middleware):
    """Reject unknown tools and bad arguments with the same text as dispatch().

    Runs before FastMCP looks the tool up or validates its arguments, so those
    failures never surface as FastMCP's own messages.
    """

    async def on_call_tool(self, context: MiddlewareContext, call_next):
        name = context.message.name
        err = check_call(name, context.message.arguments or {})
        if err is not None:
            logger.error("[MCP Error] %s: %s", name, err.message)
            raise MCPToolError(_error_text(ToolResult.failure(err)))
        return await call_next(context)


mcp = FastMCP(name=SERVICE_NAME, version=VERSION)
mcp.add_middleware(CallCheckMiddleware())


def _error_text(result: ToolResult) -> str:
    return result.to_envelope()["content"][0]["text"]


async def _run(tool_name: str, args: dict) -> str:
    result = await dispatch(tool_name, args)
    if not result.ok:
        # FastMCP turns this into isError=true with the same text
        raise MCPToolError(_error_text(result))
    return result.text


@mcp.tool(description=TOOL_SPECS["create_file"]["description"])
async def create_file(path: str, content: str) -> str:
    return await _run("create_file", {"path": path, "content": content})


@mcp.tool(description=TOOL_SPECS["read_file"]["description"])
async def read_file(path: str) -> str:
    return await _run("read_file", {"path": path})


@mcp.tool(description=TOOL_SPECS["edit_file"]["description"])
async def edit_file(path: str, content: str) -> str:
    return await _run("edit_file", {"path": path, "content": content})


@mcp.tool(description=TOOL_SPECS["delete_file"]["description"])
async def delete_file(path: str) -> str:
    return await _run("delete_file", {"path": path})


@mcp.tool(description=TOOL_SPECS["list_files"]["description"])
async def list_files(path: str) -> str:
    return await _run("list_files", {"path": path})


def main() -> None:
    setup_logging()
    logger.info("Filesystem MCP server running on %s", MCP_TRANSPORT)
    if MCP_TRANSPORT == "http":
        mcp.run(transport="http")
    else:
        mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
