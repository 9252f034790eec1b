"""
Shared configuration for gdrive-tools.

This module centralizes configuration values to avoid hardcoded values
scattered throughout the codebase.
"""

import os

from dotenv import load_dotenv

load_dotenv()

# Credentials directory
CREDENTIALS_DIR = os.path.expanduser(
    os.getenv("GDRIVE_TOOLS_CREDENTIALS_DIR", "~/.config/gdrive-tools")
)

# Logging
LOG_LEVEL = os.getenv("GDRIVE_TOOLS_LOG_LEVEL", "INFO").upper()

# Transport mode (stdio or streamable-http)
TRANSPORT = os.getenv("GDRIVE_TOOLS_TRANSPORT", "stdio")


def get_credentials_dir() -> str:
    """
    Get the credentials directory path, creating it if necessary.

    Returns:
        Path to the credentials directory.
    """
    if not os.path.exists(CREDENTIALS_DIR):
        os.makedirs(CREDENTIALS_DIR, exist_ok=True)
    return CREDENTIALS_DIR


def get_client_secret_file() -> str:
    """Path of the OAuth client secrets JSON file."""
    explicit = os.getenv("GDRIVE_TOOLS_CLIENT_SECRET_FILE")
    if explicit:
        return os.path.expanduser(explicit)
    return os.path.join(get_credentials_dir(), "client_secret.json")


def get_token_file() -> str:
    """Path of the cached authorized-user token."""
    explicit = os.getenv("GDRIVE_TOOLS_TOKEN_FILE")
    if explicit:
        return os.path.expanduser(explicit)
    return os.path.join(get_credentials_dir(), "token.json")
