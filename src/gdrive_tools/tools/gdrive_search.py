"""Search files in Google Drive, optionally inside one shared drive."""
import asyncio
import logging
import re
from typing import Any, Optional

from ..utils.constants import (
    DEFAULT_PAGE_SIZE,
    DRIVE_STOP_WORDS,
    MAX_PAGE_SIZE,
    SPREADSHEET_MIME_TYPE,
)
from ..utils.errors import GDriveError, describe_error
from .drive_resolution import resolve_shared_drive
from .types import DriveClient, ToolResponse, ToolSchema, error_response, text_response

logger = logging.getLogger(__name__)

schema: ToolSchema = {
    "name": "gdrive_search",
    "description": "Search for files in Google Drive. Optionally filter by shared drive name.",
    "inputSchema": {
        "type": "object",
        "properties": {
            "query": {
                "type": "string",
                "description": "Search query",
            },
            "pageToken": {
                "type": "string",
                "description": "Token for the next page of results",
            },
            "pageSize": {
                "type": "number",
                "description": "Number of results per page (max 100)",
            },
            "driveName": {
                "type": "string",
                "description": "Optional shared drive name to filter files by (e.g., 'OI Team')",
            },
        },
        "required": ["query"],
    },
}

_STOP_WORD_PATTERN = re.compile("|".join(DRIVE_STOP_WORDS))


def escape_query(text: str) -> str:
    """Escape backslashes and single quotes for a Drive query string literal."""
    return text.replace("\\", "\\\\").replace("'", "\\'")


def is_drive_listing_query(query: str, drive_name: str) -> bool:
    """Whether a drive-scoped query only asks to list the drive's contents.

    This is a word-matching heuristic: a query that is empty, names the drive,
    or is made only of filler words ("show all files in shared drive") or the
    drive's own words carries no search term. Stop words are stripped as
    substrings in one of the checks, so it can misfire on real terms that
    happen to be built from them.
    """
    cleaned = query.lower().strip()
    if not cleaned:
        return True

    drive_lower = drive_name.lower().strip()
    if cleaned == drive_lower:
        return True

    if "drive" in cleaned and _STOP_WORD_PATTERN.sub("", cleaned).strip() == "":
        return True

    allowed = set(DRIVE_STOP_WORDS) | set(drive_lower.split())
    return all(word in allowed for word in cleaned.split())


def build_search_query(
    query: str,
    drive_id: Optional[str] = None,
    drive_name: Optional[str] = None,
) -> str:
    """Build the Drive filter expression for a search.

    Args:
        query: Free-text user query.
        drive_id: Resolved shared drive ID, if the search is scoped.
        drive_name: Name the drive was resolved from.

    Returns:
        A Drive Query Language expression.
    """
    user_query = query.strip()

    if drive_id:
        if is_drive_listing_query(user_query, drive_name or ""):
            search_query = "trashed = false"
        else:
            search_query = f"name contains '{escape_query(user_query)}' and trashed = false"
        return f"{search_query} and '{drive_id}' in parents"

    if not user_query:
        return "trashed = false"

    conditions = [f"name contains '{escape_query(user_query)}'"]
    if "sheet" in user_query.lower():
        conditions.append(f"mimeType = '{SPREADSHEET_MIME_TYPE}'")
    return f"({' or '.join(conditions)}) and trashed = false"


def format_results(result: dict[str, Any]) -> str:
    files = result.get("files") or []
    file_list = "\n".join(
        f"{f.get('id')} {f.get('name')} ({f.get('mimeType')})" for f in files
    )
    text = f"Found {len(files)} files:\n{file_list}"

    next_page_token = result.get("nextPageToken")
    if next_page_token:
        text += f"\n\nMore results available. Use pageToken: {next_page_token}"
    return text


async def search(args: dict[str, Any], client: DriveClient) -> ToolResponse:
    """Search files by name, scoped to a shared drive when ``driveName`` is given."""
    drive_name = args.get("driveName")
    try:
        drive = await resolve_shared_drive(client, drive_name)
    except GDriveError as e:
        return error_response(e.message)

    search_query = build_search_query(args.get("query") or "", drive.drive_id, drive_name)
    page_size = min(int(args.get("pageSize") or DEFAULT_PAGE_SIZE), MAX_PAGE_SIZE)

    try:
        result = await asyncio.to_thread(
            client.list_files,
            search_query,
            page_size=page_size,
            page_token=args.get("pageToken"),
            drive_id=drive.drive_id,
        )
    except Exception as e:
        logger.warning("Search failed for %r: %s", search_query, e)
        return error_response(f"Error searching files: {describe_error(e)}")

    return text_response(format_results(result))
