from core.fs import LocalFilesystem
from core.results import ToolResult
from tools.catalog import get_arg

TOOL_NAME = "edit_file"

TOOL_SPEC = {
    "name": "edit_file",
    "description": "Edit file content",
    "inputSchema": {
        "type": "object",
        "properties": {
            "path": {"type": "string", "description": "File path"},
            "content": {"type": "string", "description": "New content"},
        },
        "required": ["path", "content"],
    },
}


async def run(args: dict, fs: LocalFilesystem) -> ToolResult:
    path = get_arg(args, "path")
    content = get_arg(args, "content")

    # No existence check: a missing file is simply created (parent must exist).
    await fs.write_text(path, content)
    return ToolResult.success(f"File edited: {path}")
