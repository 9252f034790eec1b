"""Upload a local file to Google Drive."""
import asyncio
import logging
import os
from typing import Any

from ..utils.constants import DEFAULT_UPLOAD_MIME_TYPE, DEFAULT_UPLOAD_NAME, UPLOAD_MIME_TYPES
from ..utils.errors import GDriveError, LocalFileNotFoundError, describe_error
from .drive_resolution import resolve_shared_drive
from .types import DriveClient, ToolResponse, ToolSchema, error_response, text_response

logger = logging.getLogger(__name__)

schema: ToolSchema = {
    "name": "gdrive_upload_file",
    "description": "Upload a file to Google Drive. Optionally specify a parent folder or shared drive.",
    "inputSchema": {
        "type": "object",
        "properties": {
            "filePath": {
                "type": "string",
                "description": "Local file path to upload",
            },
            "fileName": {
                "type": "string",
                "description": "Name for the file in Google Drive (optional, defaults to original filename)",
            },
            "parentId": {
                "type": "string",
                "description": "Optional parent folder ID. If not provided, file will be uploaded to root or specified drive.",
            },
            "driveName": {
                "type": "string",
                "description": "Optional shared drive name. If provided, file will be uploaded to that shared drive.",
            },
        },
        "required": ["filePath"],
    },
}


def get_mime_type(file_path: str) -> str:
    """Guess the upload MIME type from the file extension."""
    ext = file_path.rsplit(".", 1)[-1].lower()
    return UPLOAD_MIME_TYPES.get(ext, DEFAULT_UPLOAD_MIME_TYPE)


def default_file_name(file_path: str) -> str:
    return os.path.basename(file_path) or DEFAULT_UPLOAD_NAME


async def upload_file(args: dict[str, Any], client: DriveClient) -> ToolResponse:
    """Upload ``filePath`` under ``parentId``, the named shared drive's root, or My Drive root."""
    try:
        drive = await resolve_shared_drive(client, args.get("driveName"))
    except GDriveError as e:
        return error_response(e.message)

    file_path = args["filePath"]
    if not os.path.exists(file_path):
        return error_response(LocalFileNotFoundError(file_path).message)

    parent_id = drive.parent_for(args.get("parentId"))
    file_name = args.get("fileName") or default_file_name(file_path)

    try:
        uploaded = await asyncio.to_thread(
            client.upload_file,
            file_path,
            file_name,
            get_mime_type(file_path),
            parent_id=parent_id,
            drive_id=drive.drive_id,
        )
    except Exception as e:
        logger.warning("Uploading %s failed: %s", file_path, e)
        return error_response(f"❌ Error uploading file: {describe_error(e)}")

    web_view_link = uploaded.get("webViewLink")
    link_line = f"View link: {web_view_link}" if web_view_link else ""
    return text_response(
        f'✅ Successfully uploaded file "{uploaded.get("name")}"\n'
        f"File ID: {uploaded.get('id')}\n"
        f"{link_line}\n"
        f"{drive.location(parent_id)}"
    )
