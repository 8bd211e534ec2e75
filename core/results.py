from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Optional

from core.errors import ToolError


@dataclass
class ToolResult:
    """Outcome of one tool call: either ``text`` or a tagged ``error``."""

    text: str = ""
    error: Optional[ToolError] = None

    @staticmethod
    def success(text: str) -> "ToolResult":
        return ToolResult(text=text)

    @staticmethod
    def failure(error: ToolError) -> "ToolResult":
        return ToolResult(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def error_kind(self) -> Optional[str]:
        return self.error.kind if self.error is not None else None

    def to_envelope(self) -> Dict[str, Any]:
        if self.error is None:
            return text_envelope(self.text)
        out = text_envelope(f"Error: {self.error.message}")
        out["isError"] = True
        return out


def text_envelope(text: str) -> Dict[str, Any]:
    return {"content": [{"type": "text", "text": text}]}
