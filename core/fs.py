from __future__ import annotations
import os
import shutil
from typing import Dict, List

import aiofiles
import aiofiles.os

_rmtree = aiofiles.os.wrap(shutil.rmtree)


class LocalFilesystem:
    """Async access to the real filesystem. No root confinement."""

    async def ensure_dir(self, path: str) -> None:
        await aiofiles.os.makedirs(path or ".", exist_ok=True)

    async def write_text(self, path: str, content: str) -> None:
        # newline="" keeps content byte-for-byte
        async with aiofiles.open(path, "w", encoding="utf-8", newline="") as f:
            await f.write(content)

    async def read_text(self, path: str) -> str:
        async with aiofiles.open(path, "r", encoding="utf-8", newline="") as f:
            return await f.read()

    async def remove(self, path: str) -> None:
        """rm -rf semantics: directories go recursively, a missing path is fine."""
        if await aiofiles.os.path.isdir(path) and not await aiofiles.os.path.islink(path):
            await _rmtree(path)
            return
        try:
            await aiofiles.os.remove(path)
        except FileNotFoundError:
            pass

    async def list_dir(self, path: str) -> List[Dict[str, str]]:
        entries = []
        with await aiofiles.os.scandir(path) as it:
            for e in it:
                entries.append({
                    "name": e.name,
                    "type": "directory" if e.is_dir(follow_symlinks=False) else "file",
                })
        entries.sort(key=lambda d: d["name"])
        return entries


def parent_dir(path: str) -> str:
    return os.path.dirname(path) or "."
