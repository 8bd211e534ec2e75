from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from core.config import SERVICE_NAME, VERSION, setup_logging
from server import mcp
from tools import call_tool, list_tools

setup_logging()


def utc_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="seconds").replace("+00:00", "Z")


class ToolCall(BaseModel):
    name: str
    arguments: Dict[str, Any] = Field(default_factory=dict)


# -----------------------------
# MCP over streamable HTTP
# -----------------------------
mcp_app = mcp.http_app(path="/mcp")

# -----------------------------
# FastAPI (health + CORS + plain JSON tool surface)
# -----------------------------
app = FastAPI(title=SERVICE_NAME, version=VERSION, lifespan=mcp_app.lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/")
def root():
    return {
        "ok": True,
        "message": "Filesystem MCP server alive",
        "service": SERVICE_NAME,
        "version": VERSION,
        "ts": utc_iso(),
        "mcp": "/mcp",
    }


@app.get("/health")
def health():
    return {"ok": True, "ts": utc_iso(), "service": SERVICE_NAME, "version": VERSION}


@app.get("/tools")
def tools_list():
    return {"tools": list_tools()}


@app.post("/tools/call")
async def tools_call(call: ToolCall):
    # errors travel inside the envelope, never as HTTP status
    return await call_tool(call.name, call.arguments)


# Mount last so the routes above win
app.mount("/", mcp_app)
