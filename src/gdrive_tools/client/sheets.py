"""Spreadsheet operations mixin for GDriveClient."""
from typing import Any

from ..utils.errors import SheetNotFoundError


class SheetsMixin:
    """Mixin providing spreadsheet-related operations."""

    def get_sheet_titles(self, spreadsheet_id: str) -> list[dict[str, Any]]:
        """List the tabs of a spreadsheet.

        Args:
            spreadsheet_id: The spreadsheet ID.

        Returns:
            List of sheet property dicts (``sheetId``, ``title``, ...), in tab order.
        """
        result = self.sheets_service.spreadsheets().get(
            spreadsheetId=spreadsheet_id, fields='sheets.properties'
        ).execute()
        return [sheet.get('properties', {}) for sheet in result.get('sheets', [])]

    def get_sheet_title(self, spreadsheet_id: str, sheet_id: int) -> str:
        """Find the title of the tab with the given sheet ID.

        Raises:
            SheetNotFoundError: If no tab has that ID.
        """
        for props in self.get_sheet_titles(spreadsheet_id):
            if props.get('sheetId') == sheet_id:
                return props['title']
        raise SheetNotFoundError(sheet_id, spreadsheet_id)

    def read_sheet_values(self, spreadsheet_id: str, range_name: str) -> dict[str, Any]:
        """Read values from a specific range in a Google Sheet.

        Args:
            spreadsheet_id: The sheet ID.
            range_name: The A1 notation range.

        Returns:
            The value range: ``range`` as resolved by the API and ``values``.
        """
        return self.sheets_service.spreadsheets().values().get(
            spreadsheetId=spreadsheet_id, range=range_name
        ).execute()

    def batch_read_sheet_values(self, spreadsheet_id: str, ranges: list[str]) -> list[dict[str, Any]]:
        """Read several ranges of a Google Sheet in one call.

        Args:
            spreadsheet_id: The sheet ID.
            ranges: A1 notation ranges.

        Returns:
            One value range per requested range.
        """
        result = self.sheets_service.spreadsheets().values().batchGet(
            spreadsheetId=spreadsheet_id, ranges=ranges
        ).execute()
        return result.get('valueRanges', [])

    def update_sheet_values(self, spreadsheet_id: str, range_name: str, values: list[list[Any]]) -> dict[str, Any]:
        """Update values in a Google Sheet.

        Args:
            spreadsheet_id: The sheet ID.
            range_name: The A1 notation range.
            values: Values to write.

        Returns:
            The update response (``updatedRange``, ``updatedCells``, ...).
        """
        body = {'values': values}
        return self.sheets_service.spreadsheets().values().update(
            spreadsheetId=spreadsheet_id, range=range_name,
            valueInputOption="USER_ENTERED", body=body
        ).execute()
