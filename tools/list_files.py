import json

from core.fs import LocalFilesystem
from core.results import ToolResult
from tools.catalog import get_arg

TOOL_NAME = "list_files"

TOOL_SPEC = {
    "name": "list_files",
    "description": "List files in directory",
    "inputSchema": {
        "type": "object",
        "properties": {
            "path": {"type": "string", "description": "Directory path"},
        },
        "required": ["path"],
    },
}


async def run(args: dict, fs: LocalFilesystem) -> ToolResult:
    entries = await fs.list_dir(get_arg(args, "path"))
    return ToolResult.success(json.dumps(entries, ensure_ascii=False, indent=2))
