"""Update a cell in a Google Sheet."""
import asyncio
import logging
from typing import Any

from ..utils.errors import describe_error
from .types import DriveClient, ToolResponse, ToolSchema, error_response, text_response

logger = logging.getLogger(__name__)

schema: ToolSchema = {
    "name": "gsheets_update_cell",
    "description": "Update a cell value in a Google Spreadsheet",
    "inputSchema": {
        "type": "object",
        "properties": {
            "fileId": {
                "type": "string",
                "description": "ID of the spreadsheet",
            },
            "range": {
                "type": "string",
                "description": "Cell range in A1 notation (e.g. 'Sheet1!A1')",
            },
            "value": {
                "type": "string",
                "description": "New cell value",
            },
        },
        "required": ["fileId", "range", "value"],
    },
}


async def update_cell(args: dict[str, Any], client: DriveClient) -> ToolResponse:
    """Write ``value`` into the single cell at ``range``."""
    range_name = args["range"]
    value = args["value"]
    try:
        await asyncio.to_thread(
            client.update_sheet_values, args["fileId"], range_name, [[value]]
        )
    except Exception as e:
        logger.warning("Updating %s in %s failed: %s", range_name, args.get("fileId"), e)
        return error_response(f"❌ Error updating cell: {describe_error(e)}")

    return text_response(f"Updated cell {range_name} to value: {value}")
