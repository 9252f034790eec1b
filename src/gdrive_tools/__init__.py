"""gdrive-tools - Google Drive and Sheets tools for LLM agents.

This package provides schema-described tools that let an AI assistant search,
read, create and upload Google Drive files and read or update Google Sheets,
each returning a uniform ``{content, isError}`` response envelope.
"""
from .client import GDriveClient
from .tools import TOOLS, call_tool, get_tool

__version__ = "0.1.0"
__all__ = ["GDriveClient", "TOOLS", "call_tool", "get_tool"]
