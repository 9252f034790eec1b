"""MCP bindings for the registered Drive and Sheets tools.

Each registry entry is published with its own input schema, so hosts see the
same parameter names, types and descriptions as ``gdrive_tools.tools.TOOLS``.
"""
from typing import Any

from fastmcp import FastMCP
from fastmcp.tools.tool import Tool as FastMCPTool, ToolResult

from ..tools import TOOLS
from .main import dispatch, mcp


class RegistryTool(FastMCPTool):
    """A FastMCP tool that forwards its arguments to the registry handler."""

    async def run(self, arguments: dict[str, Any]) -> ToolResult:
        return ToolResult(content=await dispatch(self.name, arguments))


def register_tools(server: FastMCP) -> None:
    """Add every registry tool to ``server`` in registry order."""
    for tool in TOOLS:
        server.add_tool(RegistryTool(
            name=tool.name,
            description=tool.description,
            parameters=dict(tool.input_schema),
        ))


register_tools(mcp)
