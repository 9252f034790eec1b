"""Resolution of a shared drive name to its ID, shared by the drive tools."""
import asyncio
import logging
from dataclasses import dataclass
from typing import Optional

from ..utils.errors import DriveLookupError, DriveNotFoundError
from .types import DriveClient

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DriveResolution:
    """Outcome of a successful lookup; ``drive_id`` is None when no drive was named."""

    drive_id: Optional[str] = None
    drive_name: Optional[str] = None

    @property
    def resolved(self) -> bool:
        return self.drive_id is not None

    def parent_for(self, parent_id: Optional[str]) -> Optional[str]:
        """Explicit parent wins; otherwise the shared drive's root, if any."""
        if parent_id:
            return parent_id
        return self.drive_id

    def location(self, parent_id: Optional[str]) -> str:
        """Describe where a created item lives: shared drive, parent folder or root."""
        if self.resolved:
            return f"In shared drive: {self.drive_name}"
        if parent_id:
            return f"In parent folder: {parent_id}"
        return "In root"


async def resolve_shared_drive(client: DriveClient, drive_name: Optional[str]) -> DriveResolution:
    """Look up a shared drive by exact name.

    Args:
        client: Remote client.
        drive_name: Shared drive name, or None/empty for no drive.

    Returns:
        The resolution; unresolved when no name was given.

    Raises:
        DriveNotFoundError: If no shared drive has that name.
        DriveLookupError: If the lookup call fails.
    """
    if not drive_name:
        return DriveResolution()

    try:
        drives = await asyncio.to_thread(client.find_shared_drives, drive_name)
    except Exception as e:
        raise DriveLookupError(drive_name, e) from e

    if not drives:
        raise DriveNotFoundError(drive_name)

    drive_id = drives[0]["id"]
    logger.debug("Resolved shared drive %r to %s", drive_name, drive_id)
    return DriveResolution(drive_id=drive_id, drive_name=drive_name)
