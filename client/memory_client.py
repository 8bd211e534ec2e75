from __future__ import annotations
import asyncio
import json
import logging
from typing import Any, Awaitable, Callable, Dict, List, Optional

from core.config import MEMORY_CLIENT_CONNECT_DELAY
from core.errors import (
    NotConnectedError,
    NotFoundError,
    ToolCatalogError,
    ToolError,
    UnknownToolError,
)
from core.results import ToolResult, text_envelope
from tools import list_tools as catalog_tools
from tools.catalog import CATALOG, get_arg

logger = logging.getLogger(__name__)


class MemoryStorage:
    """path -> content map owned by whoever builds the client."""

    def __init__(self, files: Optional[Dict[str, str]] = None) -> None:
        self.files: Dict[str, str] = dict(files or {})

    def __contains__(self, path: str) -> bool:
        return path in self.files

    def __len__(self) -> int:
        return len(self.files)


class MemoryFilesystemClient:
    """
    Stand-in for a real MCP filesystem client.
    Same five operations and result envelopes as the server, backed by
    MemoryStorage. No I/O, no persistence, no network.
    """

    def __init__(
        self,
        storage: Optional[MemoryStorage] = None,
        connect_delay: Optional[float] = None,
    ) -> None:
        self.storage = storage if storage is not None else MemoryStorage()
        self.connect_delay = MEMORY_CLIENT_CONNECT_DELAY if connect_delay is None else connect_delay
        self.is_connected = False

        self._handlers: Dict[str, Callable[[Dict[str, Any]], Awaitable[Dict[str, Any]]]] = {
            "create_file": lambda a: self.create_file(get_arg(a, "path"), get_arg(a, "content")),
            "read_file": lambda a: self.read_file(get_arg(a, "path")),
            "edit_file": lambda a: self.edit_file(get_arg(a, "path"), get_arg(a, "content")),
            "delete_file": lambda a: self.delete_file(get_arg(a, "path")),
            "list_files": lambda a: self.list_files(get_arg(a, "path")),
        }
        if set(self._handlers) != set(CATALOG):
            raise ToolCatalogError(f"Client handlers drift from catalog: {sorted(self._handlers)}")

    async def connect(self) -> bool:
        if self.connect_delay > 0:
            await asyncio.sleep(self.connect_delay)
        self.is_connected = True
        logger.info("Connected to MCP server (simulated)")
        return True

    def disconnect(self) -> None:
        # data stays in storage
        self.is_connected = False

    def _require_connection(self) -> None:
        if not self.is_connected:
            raise NotConnectedError()

    def _require_file(self, path: str) -> None:
        if path not in self.storage.files:
            raise NotFoundError(f"File not found: {path}")

    async def create_file(self, path: str, content: str) -> Dict[str, Any]:
        self._require_connection()
        self.storage.files[path] = content
        return text_envelope(f"File created: {path}")

    async def read_file(self, path: str) -> Dict[str, Any]:
        self._require_connection()
        self._require_file(path)
        return text_envelope(self.storage.files[path])

    async def edit_file(self, path: str, content: str) -> Dict[str, Any]:
        self._require_connection()
        self._require_file(path)
        self.storage.files[path] = content
        return text_envelope(f"File edited: {path}")

    async def delete_file(self, path: str) -> Dict[str, Any]:
        self._require_connection()
        self._require_file(path)
        del self.storage.files[path]
        return text_envelope(f"File deleted: {path}")

    async def list_files(self, base_path: str) -> Dict[str, Any]:
        """Direct children of base_path, always typed "file".

        Directories are never synthesized: base/sub/c does not produce a
        "sub" entry.
        """
        self._require_connection()
        entries = [{"name": name, "type": "file"} for name in self._direct_children(base_path)]
        return text_envelope(json.dumps(entries, ensure_ascii=False, indent=2))

    def _direct_children(self, base_path: str) -> List[str]:
        # strict "base/" prefix: a sibling key like "dirty" is not a child of "dir"
        prefix = base_path if (not base_path or base_path.endswith("/")) else base_path + "/"
        names = []
        for path in self.storage.files:
            if not path.startswith(prefix):
                continue
            name = path[len(prefix):]
            if name and "/" not in name:
                names.append(name)
        return names

    async def call_tool(self, name: str, arguments: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Same invocation surface as the server: always returns an envelope."""
        handler = self._handlers.get(name)
        try:
            if handler is None:
                raise UnknownToolError(name)
            self._require_connection()
            return await handler(arguments or {})
        except ToolError as e:
            logger.error("[MCP Error] %s: %s", name, e.message)
            return ToolResult.failure(e).to_envelope()

    def list_tools(self) -> List[Dict[str, Any]]:
        return catalog_tools()
