"""Base client with Google API service initialization."""
from typing import Any, Optional

from googleapiclient.discovery import build

from ..auth import get_creds


class GDriveClientBase:
    """Base class with Google API services.

    Services can be passed in directly, in which case no credentials are
    loaded. Otherwise the user's stored credentials are used to build them.
    """

    def __init__(
        self,
        creds: Optional[Any] = None,
        drive_service: Optional[Any] = None,
        sheets_service: Optional[Any] = None,
    ) -> None:
        """Initialize the client with authenticated Google API services."""
        if drive_service is None or sheets_service is None:
            self.creds = creds or get_creds()
        else:
            self.creds = creds
        self.drive_service = drive_service or build('drive', 'v3', credentials=self.creds)
        self.sheets_service = sheets_service or build('sheets', 'v4', credentials=self.creds)

    def get_file_metadata(self, file_id: str, fields: str = 'id, name, mimeType') -> dict[str, Any]:
        """Get metadata about a file.

        Args:
            file_id: The file ID.
            fields: Partial response field mask.

        Returns:
            Dictionary with file metadata.
        """
        return self.drive_service.files().get(
            fileId=file_id,
            fields=fields,
            supportsAllDrives=True,
        ).execute()
