"""
Core utilities package for gdrive-tools.

This package provides shared configuration.
"""

from .config import (
    CREDENTIALS_DIR,
    LOG_LEVEL,
    TRANSPORT,
    get_client_secret_file,
    get_credentials_dir,
    get_token_file,
)

__all__ = [
    "CREDENTIALS_DIR",
    "LOG_LEVEL",
    "TRANSPORT",
    "get_client_secret_file",
    "get_credentials_dir",
    "get_token_file",
]
