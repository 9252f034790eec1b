"""File management mixin for GDriveClient."""
import base64
from typing import Any, Optional

from googleapiclient.http import MediaIoBaseUpload

from ..utils.constants import (
    DEFAULT_EXPORT_MIME_TYPE,
    EXPORT_MIME_TYPES,
    FOLDER_FIELDS,
    FOLDER_MIME_TYPE,
    GOOGLE_APPS_PREFIX,
    READ_FIELDS,
    UPLOAD_FIELDS,
)


def is_text_mime_type(mime_type: str) -> bool:
    """Whether content of this MIME type can be returned as decoded text."""
    return mime_type.startswith('text/') or mime_type == 'application/json'


class FilesMixin:
    """Mixin providing file management operations."""

    def create_folder(
        self,
        name: str,
        parent_id: Optional[str] = None,
        drive_id: Optional[str] = None,
    ) -> dict[str, Any]:
        """Create a folder.

        Args:
            name: Folder name.
            parent_id: Optional parent folder ID (a shared drive ID means its root).
            drive_id: Shared drive the folder belongs to, enables shared drive support.

        Returns:
            File metadata dictionary.
        """
        file_metadata: dict[str, Any] = {
            'name': name,
            'mimeType': FOLDER_MIME_TYPE,
        }
        if parent_id:
            file_metadata['parents'] = [parent_id]

        params: dict[str, Any] = {'body': file_metadata, 'fields': FOLDER_FIELDS}
        if drive_id:
            params['supportsAllDrives'] = True

        return self.drive_service.files().create(**params).execute()

    def upload_file(
        self,
        local_path: str,
        name: str,
        mime_type: str,
        parent_id: Optional[str] = None,
        drive_id: Optional[str] = None,
    ) -> dict[str, Any]:
        """Upload a local file to Drive as a new file.

        The local file is streamed and closed before this returns.

        Args:
            local_path: Path to local file.
            name: Name of the file in Drive.
            mime_type: Content type of the upload.
            parent_id: Optional parent folder ID.
            drive_id: Shared drive the file belongs to, enables shared drive support.

        Returns:
            File metadata dictionary.
        """
        file_metadata: dict[str, Any] = {'name': name}
        if parent_id:
            file_metadata['parents'] = [parent_id]

        with open(local_path, 'rb') as fh:
            media = MediaIoBaseUpload(fh, mimetype=mime_type, resumable=True)
            params: dict[str, Any] = {
                'body': file_metadata,
                'media_body': media,
                'fields': UPLOAD_FIELDS,
            }
            if drive_id:
                params['supportsAllDrives'] = True

            return self.drive_service.files().create(**params).execute()

    def read_file(self, file_id: str) -> dict[str, Any]:
        """Read the content of a file.

        Google Workspace files are exported to a portable format; other files
        are downloaded as-is. Non-text content is base64 encoded.

        Args:
            file_id: The file ID.

        Returns:
            Dict with ``name``, ``mimeType`` (of the returned content),
            ``content`` and ``encoding`` ('text' or 'base64').
        """
        meta = self.get_file_metadata(file_id, READ_FIELDS)
        source_mime = meta.get('mimeType', '')

        if source_mime.startswith(GOOGLE_APPS_PREFIX):
            mime_type = EXPORT_MIME_TYPES.get(source_mime, DEFAULT_EXPORT_MIME_TYPE)
            data = self.drive_service.files().export(
                fileId=file_id, mimeType=mime_type
            ).execute()
        else:
            mime_type = source_mime
            data = self.drive_service.files().get_media(
                fileId=file_id, supportsAllDrives=True
            ).execute()

        if isinstance(data, str):
            data = data.encode('utf-8')

        if is_text_mime_type(mime_type):
            content = data.decode('utf-8', errors='replace')
            encoding = 'text'
        else:
            content = base64.b64encode(data).decode('ascii')
            encoding = 'base64'

        return {
            'id': meta.get('id', file_id),
            'name': meta.get('name', ''),
            'mimeType': mime_type,
            'content': content,
            'encoding': encoding,
        }
