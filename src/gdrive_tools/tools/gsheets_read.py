"""Read cell ranges from a Google Sheet."""
import asyncio
import csv
import io
import logging
from typing import Any

from ..utils.constants import DEFAULT_SHEET_RANGE
from ..utils.errors import describe_error
from .types import DriveClient, ToolResponse, ToolSchema, error_response, text_response

logger = logging.getLogger(__name__)

schema: ToolSchema = {
    "name": "gsheets_read",
    "description": (
        "Read data from a Google Spreadsheet with flexible options for ranges. "
        "Reads the first sheet when neither ranges nor sheetId is given."
    ),
    "inputSchema": {
        "type": "object",
        "properties": {
            "spreadsheetId": {
                "type": "string",
                "description": "The ID of the spreadsheet to read",
            },
            "ranges": {
                "type": "array",
                "items": {"type": "string"},
                "description": "Optional array of A1 notation ranges like ['Sheet1!A1:B10']",
            },
            "sheetId": {
                "type": "number",
                "description": "Optional specific sheet ID to read the whole tab",
            },
        },
        "required": ["spreadsheetId"],
    },
}


def format_value_range(value_range: dict[str, Any]) -> str:
    """Render one value range as a CSV block headed by its A1 range."""
    header = f"Range: {value_range.get('range', '')}"
    values = value_range.get("values") or []
    if not values:
        return f"{header}\nNo data found in range."

    output = io.StringIO()
    writer = csv.writer(output, lineterminator="\n")
    for row in values:
        writer.writerow(row)
    return f"{header}\n```csv\n{output.getvalue()}```"


def quote_sheet_title(title: str) -> str:
    """Quote a tab title for A1 notation; embedded apostrophes are doubled."""
    return "'" + title.replace("'", "''") + "'"


def _read_ranges(client: DriveClient, args: dict[str, Any]) -> list[dict[str, Any]]:
    spreadsheet_id = args["spreadsheetId"]
    ranges = args.get("ranges")
    if ranges:
        return client.batch_read_sheet_values(spreadsheet_id, list(ranges))

    sheet_id = args.get("sheetId")
    if sheet_id is not None:
        title = client.get_sheet_title(spreadsheet_id, int(sheet_id))
    else:
        sheets = client.get_sheet_titles(spreadsheet_id)
        title = sheets[0]["title"] if sheets else None

    range_name = f"{quote_sheet_title(title)}!{DEFAULT_SHEET_RANGE}" if title else DEFAULT_SHEET_RANGE
    return [client.read_sheet_values(spreadsheet_id, range_name)]


async def read_sheet(args: dict[str, Any], client: DriveClient) -> ToolResponse:
    """Read ``ranges``, the tab ``sheetId``, or the first tab of a spreadsheet."""
    try:
        value_ranges = await asyncio.to_thread(_read_ranges, client, args)
    except Exception as e:
        logger.warning("Reading spreadsheet %s failed: %s", args.get("spreadsheetId"), e)
        return error_response(f"❌ Error reading spreadsheet: {describe_error(e)}")

    if not value_ranges:
        return text_response("No data found in range.")
    return text_response("\n\n".join(format_value_range(vr) for vr in value_ranges))
