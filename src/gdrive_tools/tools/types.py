"""Shapes shared by every tool: schemas, response envelopes and the client interface."""
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Optional, Protocol, TypedDict


class TextContent(TypedDict):
    type: str
    text: str


class ToolResponse(TypedDict):
    content: list[TextContent]
    isError: bool


class InputSchema(TypedDict):
    type: str
    properties: dict[str, Any]
    required: list[str]


class ToolSchema(TypedDict):
    name: str
    description: str
    inputSchema: InputSchema


class DriveClient(Protocol):
    """The remote operations tools depend on. ``GDriveClient`` implements it."""

    def find_shared_drives(self, name: str) -> list[dict[str, Any]]: ...

    def list_files(
        self,
        query: str,
        page_size: int = ...,
        page_token: Optional[str] = None,
        drive_id: Optional[str] = None,
    ) -> dict[str, Any]: ...

    def create_folder(
        self, name: str, parent_id: Optional[str] = None, drive_id: Optional[str] = None
    ) -> dict[str, Any]: ...

    def upload_file(
        self,
        local_path: str,
        name: str,
        mime_type: str,
        parent_id: Optional[str] = None,
        drive_id: Optional[str] = None,
    ) -> dict[str, Any]: ...

    def read_file(self, file_id: str) -> dict[str, Any]: ...

    def get_sheet_titles(self, spreadsheet_id: str) -> list[dict[str, Any]]: ...

    def get_sheet_title(self, spreadsheet_id: str, sheet_id: int) -> str: ...

    def read_sheet_values(self, spreadsheet_id: str, range_name: str) -> dict[str, Any]: ...

    def batch_read_sheet_values(self, spreadsheet_id: str, ranges: list[str]) -> list[dict[str, Any]]: ...

    def update_sheet_values(
        self, spreadsheet_id: str, range_name: str, values: list[list[Any]]
    ) -> dict[str, Any]: ...


Handler = Callable[[dict[str, Any], DriveClient], Awaitable[ToolResponse]]


@dataclass(frozen=True)
class Tool:
    """A tool schema bound to the handler that executes it."""

    schema: ToolSchema
    handler: Handler

    @property
    def name(self) -> str:
        return self.schema["name"]

    @property
    def description(self) -> str:
        return self.schema["description"]

    @property
    def input_schema(self) -> InputSchema:
        return self.schema["inputSchema"]


def text_response(text: str, is_error: bool = False) -> ToolResponse:
    """Wrap text in the single-block response envelope."""
    return {"content": [{"type": "text", "text": text}], "isError": is_error}


def error_response(text: str) -> ToolResponse:
    return text_response(text, is_error=True)


def response_text(response: ToolResponse) -> str:
    """Join the text blocks of a response."""
    return "\n".join(block["text"] for block in response["content"])
