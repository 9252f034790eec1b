"""Remote client passed to every tool handler.

``GDriveClient`` satisfies ``gdrive_tools.tools.types.DriveClient``; each
mixin wraps one slice of the Drive v3 / Sheets v4 APIs.
"""
from .base import GDriveClientBase
from .drives import DrivesMixin
from .search import SearchMixin
from .files import FilesMixin
from .sheets import SheetsMixin


class GDriveClient(
    GDriveClientBase,
    DrivesMixin,
    SearchMixin,
    FilesMixin,
    SheetsMixin,
):
    """Drive and Sheets operations used by the tools.

    Shared drive lookup, file search, folder creation, uploads, file reads,
    and spreadsheet range reads and writes. Pass ``drive_service`` and
    ``sheets_service`` to run without stored credentials.
    """


__all__ = ['GDriveClient']
