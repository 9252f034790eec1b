"""Shared drive operations mixin for GDriveClient."""
from typing import Any

from ..utils.constants import SHARED_DRIVE_PAGE_SIZE


def escape_drive_name(name: str) -> str:
    """Escape single quotes for embedding a drive name in a drives query."""
    return name.replace("'", "\\'")


class DrivesMixin:
    """Mixin providing shared drive lookups."""

    def find_shared_drives(self, name: str) -> list[dict[str, Any]]:
        """Find shared drives whose name equals ``name`` exactly.

        Args:
            name: The shared drive name.

        Returns:
            List of drive resources (``id``, ``name``), possibly empty.
        """
        results = self.drive_service.drives().list(
            pageSize=SHARED_DRIVE_PAGE_SIZE,
            q=f"name = '{escape_drive_name(name)}'",
        ).execute()
        return results.get('drives', [])
