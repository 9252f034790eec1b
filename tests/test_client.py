"""Unit tests for GDriveClient request construction."""
from unittest.mock import Mock

import pytest
from googleapiclient.http import MediaIoBaseUpload

from gdrive_tools.client import GDriveClient
from gdrive_tools.client.drives import escape_drive_name
from gdrive_tools.utils.errors import SheetNotFoundError


@pytest.fixture
def drive_service():
    return Mock()


@pytest.fixture
def sheets_service():
    return Mock()


@pytest.fixture
def gdrive(drive_service, sheets_service):
    return GDriveClient(drive_service=drive_service, sheets_service=sheets_service)


class TestSharedDrives:
    """Tests for DrivesMixin."""

    def test_escape_drive_name(self):
        assert escape_drive_name("Bob's Drive") == "Bob\\'s Drive"

    def test_find_shared_drives(self, gdrive, drive_service):
        drive_service.drives.return_value.list.return_value.execute.return_value = {
            "drives": [{"id": "d1", "name": "Bob's Drive"}]
        }

        drives = gdrive.find_shared_drives("Bob's Drive")

        assert drives == [{"id": "d1", "name": "Bob's Drive"}]
        drive_service.drives.return_value.list.assert_called_once_with(
            pageSize=100, q="name = 'Bob\\'s Drive'"
        )

    def test_no_drives_key(self, gdrive, drive_service):
        drive_service.drives.return_value.list.return_value.execute.return_value = {}
        assert gdrive.find_shared_drives("Team") == []


class TestListFiles:
    """Tests for SearchMixin.list_files."""

    def test_unscoped(self, gdrive, drive_service):
        drive_service.files.return_value.list.return_value.execute.return_value = {"files": []}

        gdrive.list_files("trashed = false")

        drive_service.files.return_value.list.assert_called_once_with(
            q="trashed = false",
            pageSize=10,
            orderBy="modifiedTime desc",
            fields="nextPageToken, files(id, name, mimeType, modifiedTime, size)",
            supportsAllDrives=True,
            includeItemsFromAllDrives=True,
        )

    def test_drive_scoped_with_token(self, gdrive, drive_service):
        gdrive.list_files("trashed = false", page_size=5, page_token="tok", drive_id="d1")

        _, kwargs = drive_service.files.return_value.list.call_args
        assert kwargs["pageSize"] == 5
        assert kwargs["pageToken"] == "tok"
        assert kwargs["corpora"] == "drive"
        assert kwargs["driveId"] == "d1"
        assert kwargs["supportsAllDrives"] is True
        assert kwargs["includeItemsFromAllDrives"] is True


class TestCreateFolder:
    """Tests for FilesMixin.create_folder."""

    def test_root(self, gdrive, drive_service):
        drive_service.files.return_value.create.return_value.execute.return_value = {
            "id": "f1", "name": "X"
        }

        folder = gdrive.create_folder("X")

        assert folder == {"id": "f1", "name": "X"}
        drive_service.files.return_value.create.assert_called_once_with(
            body={"name": "X", "mimeType": "application/vnd.google-apps.folder"},
            fields="id, name, mimeType, parents",
        )

    def test_shared_drive(self, gdrive, drive_service):
        gdrive.create_folder("X", parent_id="d1", drive_id="d1")

        drive_service.files.return_value.create.assert_called_once_with(
            body={
                "name": "X",
                "mimeType": "application/vnd.google-apps.folder",
                "parents": ["d1"],
            },
            fields="id, name, mimeType, parents",
            supportsAllDrives=True,
        )


class TestUploadFile:
    """Tests for FilesMixin.upload_file."""

    def test_upload_streams_local_file(self, gdrive, drive_service, local_file):
        drive_service.files.return_value.create.return_value.execute.return_value = {"id": "u1"}

        result = gdrive.upload_file(local_file, "notes.md", "text/markdown", parent_id="p1")

        assert result == {"id": "u1"}
        _, kwargs = drive_service.files.return_value.create.call_args
        assert kwargs["body"] == {"name": "notes.md", "parents": ["p1"]}
        assert kwargs["fields"] == "id, name, mimeType, webViewLink, parents"
        assert "supportsAllDrives" not in kwargs
        media = kwargs["media_body"]
        assert isinstance(media, MediaIoBaseUpload)
        assert media.mimetype() == "text/markdown"

    def test_upload_to_shared_drive(self, gdrive, drive_service, local_file):
        gdrive.upload_file(local_file, "notes.md", "text/markdown", parent_id="d1", drive_id="d1")

        _, kwargs = drive_service.files.return_value.create.call_args
        assert kwargs["supportsAllDrives"] is True


class TestReadFile:
    """Tests for FilesMixin.read_file."""

    def test_google_doc_exported_as_markdown(self, gdrive, drive_service):
        files = drive_service.files.return_value
        files.get.return_value.execute.return_value = {
            "id": "doc1", "name": "Plan", "mimeType": "application/vnd.google-apps.document"
        }
        files.export.return_value.execute.return_value = b"# Plan"

        result = gdrive.read_file("doc1")

        files.export.assert_called_once_with(fileId="doc1", mimeType="text/markdown")
        assert result == {
            "id": "doc1",
            "name": "Plan",
            "mimeType": "text/markdown",
            "content": "# Plan",
            "encoding": "text",
        }

    def test_spreadsheet_exported_as_csv(self, gdrive, drive_service):
        files = drive_service.files.return_value
        files.get.return_value.execute.return_value = {
            "id": "s1", "name": "Data", "mimeType": "application/vnd.google-apps.spreadsheet"
        }
        files.export.return_value.execute.return_value = b"a,b\n"

        result = gdrive.read_file("s1")

        assert result["mimeType"] == "text/csv"
        assert result["content"] == "a,b\n"

    def test_binary_download_is_base64(self, gdrive, drive_service):
        files = drive_service.files.return_value
        files.get.return_value.execute.return_value = {
            "id": "p1", "name": "logo.png", "mimeType": "image/png"
        }
        files.get_media.return_value.execute.return_value = b"\x89PNG"

        result = gdrive.read_file("p1")

        files.get_media.assert_called_once_with(fileId="p1", supportsAllDrives=True)
        assert result["encoding"] == "base64"
        assert result["content"] == "iVBORw=="

    def test_json_download_is_text(self, gdrive, drive_service):
        files = drive_service.files.return_value
        files.get.return_value.execute.return_value = {
            "id": "j1", "name": "cfg.json", "mimeType": "application/json"
        }
        files.get_media.return_value.execute.return_value = b'{"a": 1}'

        assert gdrive.read_file("j1")["content"] == '{"a": 1}'


class TestSheets:
    """Tests for SheetsMixin."""

    def test_get_sheet_title(self, gdrive, sheets_service):
        sheets_service.spreadsheets.return_value.get.return_value.execute.return_value = {
            "sheets": [
                {"properties": {"sheetId": 0, "title": "Summary"}},
                {"properties": {"sheetId": 7, "title": "Q3"}},
            ]
        }

        assert gdrive.get_sheet_title("ss1", 7) == "Q3"
        sheets_service.spreadsheets.return_value.get.assert_called_with(
            spreadsheetId="ss1", fields="sheets.properties"
        )

    def test_unknown_sheet_id(self, gdrive, sheets_service):
        sheets_service.spreadsheets.return_value.get.return_value.execute.return_value = {
            "sheets": [{"properties": {"sheetId": 0, "title": "Summary"}}]
        }

        with pytest.raises(SheetNotFoundError):
            gdrive.get_sheet_title("ss1", 3)

    def test_batch_read(self, gdrive, sheets_service):
        values = sheets_service.spreadsheets.return_value.values.return_value
        values.batchGet.return_value.execute.return_value = {
            "valueRanges": [{"range": "A1:A1", "values": [["x"]]}]
        }

        assert gdrive.batch_read_sheet_values("ss1", ["A1"]) == [{"range": "A1:A1", "values": [["x"]]}]
        values.batchGet.assert_called_once_with(spreadsheetId="ss1", ranges=["A1"])

    def test_update_values(self, gdrive, sheets_service):
        values = sheets_service.spreadsheets.return_value.values.return_value

        gdrive.update_sheet_values("ss1", "B2", [["42"]])

        values.update.assert_called_once_with(
            spreadsheetId="ss1", range="B2",
            valueInputOption="USER_ENTERED", body={"values": [["42"]]}
        )
