import logging
from typing import Any, Dict, List, Optional

from core.errors import ToolError, UnderlyingIOError, from_os_error
from core.fs import LocalFilesystem
from core.results import ToolResult

from .catalog import check_call
from .loader import load_tools

logger = logging.getLogger(__name__)

TOOL_RUNNERS, TOOL_SPECS = load_tools()

_default_fs = LocalFilesystem()


def list_tools() -> List[Dict[str, Any]]:
    return list(TOOL_SPECS.values())


async def dispatch(
    tool_name: str,
    args: Optional[Dict[str, Any]] = None,
    fs: Optional[LocalFilesystem] = None,
) -> ToolResult:
    if args is None:
        args = {}
    if fs is None:
        fs = _default_fs

    logger.info("Tool call: %s path=%s", tool_name, args.get("path"))

    try:
        err = check_call(tool_name, args)
        if err is not None:
            raise err
        return await TOOL_RUNNERS[tool_name](args, fs)
    except ToolError as e:
        logger.error("[MCP Error] %s: %s", tool_name, e.message)
        return ToolResult.failure(e)
    except OSError as e:
        err = from_os_error(e)
        logger.error("[MCP Error] %s: %s", tool_name, err.message)
        return ToolResult.failure(err)
    except UnicodeDecodeError as e:
        err = UnderlyingIOError(f"File is not valid UTF-8 text: {e.reason}")
        logger.error("[MCP Error] %s: %s", tool_name, err.message)
        return ToolResult.failure(err)
    except Exception as e:
        # e.g. NUL in a path, unencodable content
        err = UnderlyingIOError(str(e))
        logger.error("[MCP Error] %s: %s", tool_name, err.message)
        return ToolResult.failure(err)


async def call_tool(
    tool_name: str,
    args: Optional[Dict[str, Any]] = None,
    fs: Optional[LocalFilesystem] = None,
) -> Dict[str, Any]:
    """Dispatch and render the wire envelope."""
    result = await dispatch(tool_name, args, fs=fs)
    return result.to_envelope()
