import logging
import os
import sys


def env(key: str, default: str | None = None) -> str | None:
    v = os.getenv(key)
    if v is None or v.strip() == "":
        return default
    return v.strip()


# --- Service ---
SERVICE_NAME = env("SERVICE_NAME", "filesystem-server")
VERSION = env("VERSION", "1.0.0")

# --- Runtime controls ---
LOG_LEVEL = env("LOG_LEVEL", "INFO")
MCP_TRANSPORT = env("MCP_TRANSPORT", "stdio")  # stdio | http

# Simulated client: how long connect() pretends to take.
MEMORY_CLIENT_CONNECT_DELAY = float(env("MEMORY_CLIENT_CONNECT_DELAY", "1.0"))


def setup_logging() -> None:
    # stderr only: stdout carries the protocol on the stdio transport
    level = getattr(logging, (LOG_LEVEL or "INFO").upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )
