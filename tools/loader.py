import importlib
import inspect
import logging
import pkgutil

from core.errors import ToolCatalogError
from tools.catalog import CATALOG

logger = logging.getLogger(__name__)

_SKIP = ("loader", "catalog", "__init__")


def load_tools():
    """
    Auto-discover tool modules inside tools/ package.
    Each tool module must expose:
      - TOOL_NAME (str)
      - TOOL_SPEC (dict)  (MCP-style tool schema)
      - async run(args: dict, fs) -> ToolResult
    """
    tools = {}
    specs = {}

    package_name = __name__.split(".")[0]  # "tools"
    package = importlib.import_module(package_name)

    for mod in pkgutil.iter_modules(package.__path__):
        name = mod.name
        if name in _SKIP:
            continue

        m = importlib.import_module(f"{package_name}.{name}")

        tool_name = getattr(m, "TOOL_NAME", None)
        tool_spec = getattr(m, "TOOL_SPEC", None)
        runner = getattr(m, "run", None)

        if not tool_name or not tool_spec or not inspect.iscoroutinefunction(runner):
            logger.debug("Skipping tools.%s: not a tool module", name)
            continue

        tools[tool_name] = runner
        specs[tool_name] = tool_spec

    validate_tools(tools, specs)
    return tools, specs


def validate_tools(tools: dict, specs: dict) -> None:
    """Fail fast if the loaded handlers drift from CATALOG."""
    missing = set(CATALOG) - set(tools)
    extra = set(tools) - set(CATALOG)
    if missing or extra:
        raise ToolCatalogError(
            f"Tool set mismatch. Missing: {sorted(missing)} Unexpected: {sorted(extra)}"
        )

    for tool_name, spec in specs.items():
        if spec.get("name") != tool_name:
            raise ToolCatalogError(
                f"TOOL_SPEC name {spec.get('name')!r} does not match TOOL_NAME {tool_name!r}"
            )
        schema = spec.get("inputSchema") or {}
        required = frozenset(schema.get("required") or [])
        if required != frozenset(CATALOG[tool_name]):
            raise ToolCatalogError(
                f"{tool_name}: required fields {sorted(required)} "
                f"!= catalog {sorted(CATALOG[tool_name])}"
            )
        props = schema.get("properties") or {}
        for field in required:
            if (props.get(field) or {}).get("type") != "string":
                raise ToolCatalogError(f"{tool_name}: field {field!r} must be declared as string")
