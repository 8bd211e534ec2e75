from __future__ import annotations
from typing import Any, Dict, Optional, Tuple

from core.errors import InvalidArgumentsError, ToolError, UnknownToolError

# Published contract: tool name -> required input fields, in reporting order.
CATALOG: Dict[str, Tuple[str, ...]] = {
    "create_file": ("path", "content"),
    "read_file": ("path",),
    "edit_file": ("path", "content"),
    "delete_file": ("path",),
    "list_files": ("path",),
}


def get_arg(args: Dict[str, Any], name: str) -> str:
    v = args.get(name)
    if v is None:
        raise InvalidArgumentsError(f"Missing required input: {name}")
    if not isinstance(v, str):
        raise InvalidArgumentsError(f"Input must be a string: {name}")
    return v


def check_call(tool_name: str, args: Dict[str, Any]) -> Optional[ToolError]:
    """Return the error a call would fail with before touching storage, if any."""
    if tool_name not in CATALOG:
        return UnknownToolError(tool_name)
    try:
        for field in CATALOG[tool_name]:
            get_arg(args, field)
    except InvalidArgumentsError as e:
        return e
    return None
