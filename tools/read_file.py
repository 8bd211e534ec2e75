from core.fs import LocalFilesystem
from core.results import ToolResult
from tools.catalog import get_arg

TOOL_NAME = "read_file"

TOOL_SPEC = {
    "name": "read_file",
    "description": "Read file content",
    "inputSchema": {
        "type": "object",
        "properties": {
            "path": {"type": "string", "description": "File path"},
        },
        "required": ["path"],
    },
}


async def run(args: dict, fs: LocalFilesystem) -> ToolResult:
    content = await fs.read_text(get_arg(args, "path"))
    return ToolResult.success(content)
