"""Shared fixtures: a substitute remote client for the tool handlers."""
import os
import sys
from unittest.mock import Mock

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "../src"))


@pytest.fixture
def client():
    """A Mock standing in for GDriveClient with benign default replies."""
    mock_client = Mock()
    mock_client.find_shared_drives.return_value = [{"id": "drive123", "name": "Team"}]
    mock_client.list_files.return_value = {"files": []}
    mock_client.create_folder.return_value = {"id": "folder123", "name": "Reports"}
    mock_client.upload_file.return_value = {"id": "file123", "name": "notes.md"}
    return mock_client


@pytest.fixture
def local_file(tmp_path):
    path = tmp_path / "notes.md"
    path.write_text("# Notes\n")
    return str(path)
