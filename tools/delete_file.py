from core.fs import LocalFilesystem
from core.results import ToolResult
from tools.catalog import get_arg

TOOL_NAME = "delete_file"

TOOL_SPEC = {
    "name": "delete_file",
    "description": "Delete a file",
    "inputSchema": {
        "type": "object",
        "properties": {
            "path": {"type": "string", "description": "File path"},
        },
        "required": ["path"],
    },
}


async def run(args: dict, fs: LocalFilesystem) -> ToolResult:
    path = get_arg(args, "path")
    await fs.remove(path)
    return ToolResult.success(f"File deleted: {path}")
