"""Unit tests for the tool registry."""
import asyncio
import os

import pytest

from gdrive_tools.tools import TOOLS, call_tool, get_tool
from gdrive_tools.utils.errors import ToolNotFoundError


def test_registry_order():
    assert [tool.name for tool in TOOLS] == [
        "gdrive_search",
        "gdrive_read_file",
        "gdrive_create_folder",
        "gdrive_upload_file",
        "gsheets_update_cell",
        "gsheets_read",
    ]


@pytest.mark.parametrize("tool", TOOLS, ids=lambda tool: tool.name)
def test_schema_shape(tool):
    assert set(tool.schema) == {"name", "description", "inputSchema"}
    assert tool.description
    assert tool.input_schema["type"] == "object"
    assert set(tool.input_schema["required"]) <= set(tool.input_schema["properties"])


def test_get_tool():
    assert get_tool("gdrive_search") is TOOLS[0]


def test_unknown_tool():
    with pytest.raises(ToolNotFoundError):
        get_tool("gdrive_delete_everything")


def test_call_tool_dispatches(client):
    result = asyncio.run(call_tool("gdrive_create_folder", {"folderName": "Reports"}, client))

    assert result["isError"] is False
    client.create_folder.assert_called_once()


class TestMissingDriveAcrossTools:
    """Every tool accepting driveName rejects a drive that does not exist."""

    @pytest.mark.parametrize("name, args", [
        ("gdrive_search", {"query": "x"}),
        ("gdrive_create_folder", {"folderName": "x"}),
        ("gdrive_upload_file", {"filePath": os.path.abspath(__file__)}),
    ])
    def test_missing_drive(self, client, name, args):
        client.find_shared_drives.return_value = []

        result = asyncio.run(call_tool(name, {**args, "driveName": "No Such Drive"}, client))

        assert result["isError"] is True
        assert len(result["content"]) == 1
        assert result["content"][0]["type"] == "text"
        assert "No Such Drive" in result["content"][0]["text"]
