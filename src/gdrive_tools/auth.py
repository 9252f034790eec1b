import logging
import os

from google.auth.exceptions import RefreshError
from google.auth.transport.requests import Request
from google.oauth2.credentials import Credentials
from google_auth_oauthlib.flow import InstalledAppFlow

from .core.config import get_client_secret_file, get_token_file
from .utils.errors import AuthenticationError

logger = logging.getLogger(__name__)

# If modifying these scopes, delete the token file.
SCOPES = [
    "https://www.googleapis.com/auth/drive",
    "https://www.googleapis.com/auth/spreadsheets",
]


def get_creds() -> Credentials:
    """Load, refresh or create the user's Google credentials.

    Returns:
        Credentials object.

    Raises:
        AuthenticationError: If no client secrets file is available.
    """
    token_file = get_token_file()
    creds = None
    # The token file stores the user's access and refresh tokens, and is
    # created automatically when the authorization flow completes for the first
    # time.
    if os.path.exists(token_file):
        creds = Credentials.from_authorized_user_file(token_file, SCOPES)

    if creds and creds.valid:
        return creds

    if creds and creds.expired and creds.refresh_token:
        try:
            creds.refresh(Request())
        except RefreshError as e:
            logger.warning("Error refreshing token: %s. Re-authenticating.", e)
            creds = None

    if not creds or not creds.valid:
        client_secret_file = get_client_secret_file()
        if not os.path.exists(client_secret_file):
            raise AuthenticationError(
                f"Client secrets file not found at {client_secret_file}. "
                "Please download it from Google Cloud Console."
            )

        flow = InstalledAppFlow.from_client_secrets_file(client_secret_file, SCOPES)
        creds = flow.run_local_server(port=0)

    # Save the credentials for the next run
    with open(token_file, "w") as token:
        token.write(creds.to_json())
    logger.info("Saved credentials to %s", token_file)

    return creds
