"""Create a folder in Google Drive."""
import asyncio
import logging
from typing import Any

from ..utils.errors import GDriveError, describe_error
from .drive_resolution import resolve_shared_drive
from .types import DriveClient, ToolResponse, ToolSchema, error_response, text_response

logger = logging.getLogger(__name__)

schema: ToolSchema = {
    "name": "gdrive_create_folder",
    "description": "Create a new folder in Google Drive. Optionally specify a parent folder or shared drive.",
    "inputSchema": {
        "type": "object",
        "properties": {
            "folderName": {
                "type": "string",
                "description": "Name of the folder to create",
            },
            "parentId": {
                "type": "string",
                "description": "Optional parent folder ID. If not provided, folder will be created in root or specified drive.",
            },
            "driveName": {
                "type": "string",
                "description": "Optional shared drive name. If provided, folder will be created in that shared drive.",
            },
        },
        "required": ["folderName"],
    },
}


async def create_folder(args: dict[str, Any], client: DriveClient) -> ToolResponse:
    """Create a folder under ``parentId``, the named shared drive's root, or My Drive root."""
    try:
        drive = await resolve_shared_drive(client, args.get("driveName"))
    except GDriveError as e:
        return error_response(e.message)

    parent_id = drive.parent_for(args.get("parentId"))

    try:
        folder = await asyncio.to_thread(
            client.create_folder,
            args["folderName"],
            parent_id=parent_id,
            drive_id=drive.drive_id,
        )
    except Exception as e:
        logger.warning("Creating folder %r failed: %s", args.get("folderName"), e)
        return error_response(f"❌ Error creating folder: {describe_error(e)}")

    return text_response(
        f'✅ Successfully created folder "{folder.get("name")}"\n'
        f"Folder ID: {folder.get('id')}\n"
        f"{drive.location(parent_id)}"
    )
