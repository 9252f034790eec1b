"""MCP Server initialization and entry point."""

from typing import Any, Optional

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError

from ..client import GDriveClient
from ..tools import call_tool, get_tool
from ..tools.types import response_text
from ..utils.errors import GDriveError

# Initialize MCP Server
mcp = FastMCP("gdrive-tools")

# Global client, initialized lazily
_client: Optional[GDriveClient] = None


def get_client() -> GDriveClient:
    """Get or create the global GDriveClient instance.

    Returns:
        The authenticated GDriveClient instance.

    Raises:
        AuthenticationError: If no credentials can be obtained.
    """
    global _client
    if not _client:
        _client = GDriveClient()
    return _client


async def dispatch(name: str, args: dict[str, Any]) -> str:
    """Run a registered tool and translate its envelope for FastMCP.

    Error envelopes are raised as ``ToolError`` so the host reports them with
    ``isError`` set; successful envelopes return their text.
    """
    args = {key: value for key, value in args.items() if value is not None}
    try:
        missing = [key for key in get_tool(name).input_schema["required"] if key not in args]
        if missing:
            raise ToolError(f"Missing required argument(s): {', '.join(missing)}")
        response = await call_tool(name, args, get_client())
    except GDriveError as e:
        raise ToolError(e.message) from e

    text = response_text(response)
    if response["isError"]:
        raise ToolError(text)
    return text
