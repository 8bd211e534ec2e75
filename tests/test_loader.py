import copy

import pytest

from core.errors import ToolCatalogError
from tools import TOOL_RUNNERS, TOOL_SPECS, list_tools
from tools.loader import validate_tools

EXPECTED_REQUIRED = {
    "create_file": {"path", "content"},
    "read_file": {"path"},
    "edit_file": {"path", "content"},
    "delete_file": {"path"},
    "list_files": {"path"},
}


def test_exactly_five_tools_loaded():
    assert set(TOOL_RUNNERS) == set(EXPECTED_REQUIRED)
    assert set(TOOL_SPECS) == set(EXPECTED_REQUIRED)


def test_required_fields_are_strings():
    for spec in list_tools():
        schema = spec["inputSchema"]
        assert schema["type"] == "object"
        assert set(schema["required"]) == EXPECTED_REQUIRED[spec["name"]]
        for field in schema["required"]:
            assert schema["properties"][field]["type"] == "string"
        assert spec["description"]


def test_validate_rejects_missing_tool():
    runners = dict(TOOL_RUNNERS)
    specs = dict(TOOL_SPECS)
    runners.pop("list_files")
    specs.pop("list_files")

    with pytest.raises(ToolCatalogError) as excinfo:
        validate_tools(runners, specs)
    assert "list_files" in str(excinfo.value)


def test_validate_rejects_extra_tool():
    runners = dict(TOOL_RUNNERS, move_file=TOOL_RUNNERS["edit_file"])
    specs = dict(TOOL_SPECS, move_file={"name": "move_file", "inputSchema": {}})

    with pytest.raises(ToolCatalogError):
        validate_tools(runners, specs)


def test_validate_rejects_required_field_drift():
    specs = copy.deepcopy(TOOL_SPECS)
    specs["edit_file"]["inputSchema"]["required"] = ["path"]

    with pytest.raises(ToolCatalogError) as excinfo:
        validate_tools(TOOL_RUNNERS, specs)
    assert "edit_file" in str(excinfo.value)


def test_validate_rejects_name_mismatch():
    specs = copy.deepcopy(TOOL_SPECS)
    specs["read_file"]["name"] = "cat_file"

    with pytest.raises(ToolCatalogError):
        validate_tools(TOOL_RUNNERS, specs)
