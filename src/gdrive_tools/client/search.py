"""Search operations mixin for GDriveClient."""
from typing import Any, Optional

from ..utils.constants import DEFAULT_PAGE_SIZE, SEARCH_FIELDS


class SearchMixin:
    """Mixin providing search-related operations."""

    def list_files(
        self,
        query: str,
        page_size: int = DEFAULT_PAGE_SIZE,
        page_token: Optional[str] = None,
        drive_id: Optional[str] = None,
    ) -> dict[str, Any]:
        """List files matching a Drive Query Language expression.

        Items from every accessible drive are included. When ``drive_id`` is
        given the search corpus is narrowed to that shared drive.

        Args:
            query: Drive query expression (e.g. "name contains 'x' and trashed = false").
            page_size: Maximum number of results in the page.
            page_token: Token of the page to fetch, from a previous call.
            drive_id: Optional shared drive to search in.

        Returns:
            The raw list response with ``files`` and optional ``nextPageToken``.
        """
        params: dict[str, Any] = {
            'q': query,
            'pageSize': page_size,
            'orderBy': 'modifiedTime desc',
            'fields': SEARCH_FIELDS,
            'supportsAllDrives': True,
            'includeItemsFromAllDrives': True,
        }
        if page_token:
            params['pageToken'] = page_token
        if drive_id:
            params['corpora'] = 'drive'
            params['driveId'] = drive_id

        return self.drive_service.files().list(**params).execute()
