"""Errors raised by the Drive client and the tool handlers.

Tool handlers turn these into error envelopes; the message of each one is
the text an agent sees after ``isError: true``.
"""
from typing import Optional

from googleapiclient.errors import HttpError


class GDriveError(Exception):
    """A failure that can be reported to the calling agent as-is.

    Attributes:
        message: Text embedded in the error envelope.
        file_id: Drive or spreadsheet ID the failure concerns, if any.
    """

    def __init__(self, message: str, file_id: Optional[str] = None) -> None:
        self.message = message
        self.file_id = file_id
        super().__init__(self.format_message())

    def format_message(self) -> str:
        """Message with the related ID appended, when there is one."""
        if self.file_id:
            return f"{self.message} (file: {self.file_id})"
        return self.message


class AuthenticationError(GDriveError):
    """No usable Google credentials: missing client secrets, or a revoked token (HTTP 401)."""


class FileNotFoundError(GDriveError):
    """Drive answered 404 for the file, folder or spreadsheet."""


class PermissionDeniedError(GDriveError):
    """Drive answered 403, e.g. no write access to the target folder or shared drive."""


class QuotaExceededError(GDriveError):
    """Drive or Sheets answered 429; the request can be retried later."""


class DriveNotFoundError(GDriveError):
    """Raised when no shared drive matches the requested name."""

    def __init__(self, drive_name: str) -> None:
        self.drive_name = drive_name
        super().__init__(
            f'Shared drive "{drive_name}" not found. '
            "Please check the drive name and ensure you have access to it."
        )


class DriveLookupError(GDriveError):
    """Raised when the shared drive lookup call itself fails.

    Attributes:
        drive_name: The name that was being looked up.
        cause: The underlying exception.
    """

    def __init__(self, drive_name: str, cause: Exception) -> None:
        self.drive_name = drive_name
        self.cause = cause
        super().__init__(f'Error finding shared drive "{drive_name}": {describe_error(cause)}')


class LocalFileNotFoundError(GDriveError):
    """Raised when a local file doesn't exist."""

    def __init__(self, local_path: str) -> None:
        self.local_path = local_path
        super().__init__(f"File not found: {local_path}")


class SheetNotFoundError(GDriveError):
    """Raised when a spreadsheet has no tab with the requested sheet ID."""

    def __init__(self, sheet_id: int, spreadsheet_id: Optional[str] = None) -> None:
        self.sheet_id = sheet_id
        super().__init__(f"Sheet ID {sheet_id} not found", spreadsheet_id)


class ToolNotFoundError(GDriveError):
    """Raised when a tool name is not in the registry."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown tool: {name}")


def handle_http_error(error: HttpError, file_id: Optional[str] = None) -> GDriveError:
    """Convert googleapiclient HttpError to a specific exception.

    The underlying API reason is kept in the message so callers still see
    what the service reported.

    Args:
        error: The HttpError from googleapiclient.
        file_id: Optional file ID for context.

    Returns:
        An appropriate GDriveError subclass.
    """
    try:
        status = error.resp.status
    except AttributeError:
        return GDriveError(f"API error: {error}", file_id)

    reason = _http_reason(error)
    if status == 401:
        return AuthenticationError(
            f"Authentication failed: {reason}. Delete the token file and re-authenticate.",
            file_id
        )
    elif status == 403:
        return PermissionDeniedError(f"Access denied: {reason}", file_id)
    elif status == 404:
        return FileNotFoundError(f"Not found: {reason}", file_id)
    elif status == 429:
        return QuotaExceededError(
            f"API quota exceeded: {reason}. Please wait a moment and try again.",
            file_id
        )
    else:
        return GDriveError(f"API error (HTTP {status}): {reason}", file_id)


def _http_reason(error: HttpError) -> str:
    reason = getattr(error, "reason", None)
    return reason or str(error)


def describe_error(error: Exception) -> str:
    """Return the human-readable text of an error for embedding in responses.

    Args:
        error: Any exception raised while serving a tool call.

    Returns:
        The error's message.
    """
    if isinstance(error, GDriveError):
        return error.format_message()
    if isinstance(error, HttpError):
        return handle_http_error(error).format_message()
    return str(error)
