"""gdrive-tools MCP server."""

import logging
import sys

from ..core.config import LOG_LEVEL, TRANSPORT
from .main import mcp, get_client, dispatch

from . import drive_tools

__all__ = ["mcp", "get_client", "dispatch", "main"]


def main():
    """Entry point for the gdrive-tools MCP server."""
    # stdout carries the stdio transport
    logging.basicConfig(
        stream=sys.stderr,
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    mcp.run(transport=TRANSPORT, show_banner=False)
