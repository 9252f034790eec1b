"""Centralized constants for the Google Drive tools."""

# MIME Types - Google Apps
FOLDER_MIME_TYPE = 'application/vnd.google-apps.folder'
SPREADSHEET_MIME_TYPE = 'application/vnd.google-apps.spreadsheet'
GOOGLE_APPS_PREFIX = 'application/vnd.google-apps'

# Export formats for Google Workspace files
EXPORT_MIME_TYPES = {
    'application/vnd.google-apps.document': 'text/markdown',
    'application/vnd.google-apps.spreadsheet': 'text/csv',
    'application/vnd.google-apps.presentation': 'text/plain',
    'application/vnd.google-apps.drawing': 'image/png',
}
DEFAULT_EXPORT_MIME_TYPE = 'text/plain'

# Upload MIME types, keyed by lowercase file extension
UPLOAD_MIME_TYPES = {
    'md': 'text/markdown',
    'txt': 'text/plain',
    'json': 'application/json',
    'pdf': 'application/pdf',
    'doc': 'application/msword',
    'docx': 'application/vnd.openxmlformats-officedocument.wordprocessingml.document',
    'xls': 'application/vnd.ms-excel',
    'xlsx': 'application/vnd.openxmlformats-officedocument.spreadsheetml.sheet',
    'png': 'image/png',
    'jpg': 'image/jpeg',
    'jpeg': 'image/jpeg',
    'gif': 'image/gif',
    'zip': 'application/zip',
}
DEFAULT_UPLOAD_MIME_TYPE = 'application/octet-stream'
DEFAULT_UPLOAD_NAME = 'uploaded-file'

# Words that carry no search meaning when a search is scoped to a shared drive
DRIVE_STOP_WORDS = (
    'drive', 'shared', 'in', 'from', 'search', 'find', 'google', 'gdrive',
    'for', 'list', 'show', 'everything', 'all', 'files',
)

# Default Values
DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100
SHARED_DRIVE_PAGE_SIZE = 100
DEFAULT_SHEET_RANGE = 'A:ZZZ'

# Fields requested from the Drive API
SEARCH_FIELDS = 'nextPageToken, files(id, name, mimeType, modifiedTime, size)'
FOLDER_FIELDS = 'id, name, mimeType, parents'
UPLOAD_FIELDS = 'id, name, mimeType, webViewLink, parents'
READ_FIELDS = 'id, name, mimeType'
