"""Tool registry: every tool schema paired with its handler, in publication order."""
from typing import Any

from ..utils.errors import ToolNotFoundError
from . import (
    gdrive_create_folder,
    gdrive_read_file,
    gdrive_search,
    gdrive_upload_file,
    gsheets_read,
    gsheets_update_cell,
)
from .types import DriveClient, Tool, ToolResponse

TOOLS: tuple[Tool, ...] = (
    Tool(gdrive_search.schema, gdrive_search.search),
    Tool(gdrive_read_file.schema, gdrive_read_file.read_file),
    Tool(gdrive_create_folder.schema, gdrive_create_folder.create_folder),
    Tool(gdrive_upload_file.schema, gdrive_upload_file.upload_file),
    Tool(gsheets_update_cell.schema, gsheets_update_cell.update_cell),
    Tool(gsheets_read.schema, gsheets_read.read_sheet),
)


def get_tool(name: str) -> Tool:
    """Look up a registered tool by name.

    Raises:
        ToolNotFoundError: If no tool has that name.
    """
    for tool in TOOLS:
        if tool.name == name:
            return tool
    raise ToolNotFoundError(name)


async def call_tool(name: str, args: dict[str, Any], client: DriveClient) -> ToolResponse:
    """Dispatch a call to the named tool's handler."""
    return await get_tool(name).handler(args, client)


__all__ = ["TOOLS", "Tool", "call_tool", "get_tool"]
