from core.fs import LocalFilesystem, parent_dir
from core.results import ToolResult
from tools.catalog import get_arg

TOOL_NAME = "create_file"

TOOL_SPEC = {
    "name": "create_file",
    "description": "Create a new file with content",
    "inputSchema": {
        "type": "object",
        "properties": {
            "path": {"type": "string", "description": "File path"},
            "content": {"type": "string", "description": "File content"},
        },
        "required": ["path", "content"],
    },
}


async def run(args: dict, fs: LocalFilesystem) -> ToolResult:
    path = get_arg(args, "path")
    content = get_arg(args, "content")

    await fs.ensure_dir(parent_dir(path))
    await fs.write_text(path, content)
    return ToolResult.success(f"File created: {path}")
