"""Read the contents of a Google Drive file."""
import asyncio
import logging
from typing import Any

from ..utils.errors import describe_error
from .types import DriveClient, ToolResponse, ToolSchema, error_response, text_response

logger = logging.getLogger(__name__)

schema: ToolSchema = {
    "name": "gdrive_read_file",
    "description": (
        "Read contents of a file from Google Drive. Google Docs are exported as "
        "Markdown, Sheets as CSV and Slides as plain text."
    ),
    "inputSchema": {
        "type": "object",
        "properties": {
            "fileId": {
                "type": "string",
                "description": "ID of the file to read",
            },
        },
        "required": ["fileId"],
    },
}


async def read_file(args: dict[str, Any], client: DriveClient) -> ToolResponse:
    """Return a file's text, or its base64 bytes for binary content."""
    file_id = args["fileId"]
    try:
        file = await asyncio.to_thread(client.read_file, file_id)
    except Exception as e:
        logger.warning("Reading file %s failed: %s", file_id, e)
        return error_response(f"❌ Error reading file: {describe_error(e)}")

    if file["encoding"] == "base64":
        return text_response(
            f"Binary file {file['name']} ({file['mimeType']}), base64 encoded:\n\n{file['content']}"
        )
    return text_response(f"Contents of {file['name']}:\n\n{file['content']}")
