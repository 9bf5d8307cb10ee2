"""pytest-mailtrap.

A pytest plugin to assert on the emails captured by a Mailtrap inbox.

Example:
    ```python
    def test_password_reset(client, mailtrap):
        client.post("/password-reset", data={"email": "jane@example.com"})

        mailtrap.have_email_within_inbox(
            {"to_email": "jane@example.com", "subject": "Reset your password"}
        )
        mailtrap.see_in_email_html_body("/password-reset/confirm")
        mailtrap.see_an_attachment(False)
    ```

Outside of pytest, the same assertions are available from MailtrapClient:

    ```python
    from pytest_mailtrap import MailtrapClient

    with MailtrapClient(api_token="your-api-token", inbox_id="123456") as client:
        client.assertions.receive_an_email_with_subject("Welcome")
    ```
"""

from .assertions import MailtrapAssertions
from .client import MailtrapClient
from .constants import (
    DEFAULT_BASE_URL,
    DEFAULT_POLL_INTERVAL_MS,
    DEFAULT_TIMEOUT_MS,
    DEFAULT_WAIT_SECONDS,
)
from .errors import (
    ApiError,
    AuthenticationError,
    ConfigError,
    DecodeError,
    EmptyInboxError,
    InboxNotFoundError,
    MailAssertionError,
    MailtrapError,
    NetworkError,
)
from .inbox import Inbox
from .matcher import find_match, match_message, normalize_html_body
from .poller import Poller
from .types import (
    Attachment,
    ClientConfig,
    ExpectedCriteria,
    MatchResult,
    Message,
    PollingConfig,
)

__version__ = "0.1.0"

__all__ = [
    # Main classes
    "MailtrapClient",
    "MailtrapAssertions",
    "Inbox",
    "Poller",
    # Matching
    "find_match",
    "match_message",
    "normalize_html_body",
    # Constants
    "DEFAULT_BASE_URL",
    "DEFAULT_POLL_INTERVAL_MS",
    "DEFAULT_TIMEOUT_MS",
    "DEFAULT_WAIT_SECONDS",
    # Configuration
    "ClientConfig",
    "PollingConfig",
    # Data types
    "Attachment",
    "ExpectedCriteria",
    "MatchResult",
    "Message",
    # Errors
    "MailtrapError",
    "ConfigError",
    "NetworkError",
    "ApiError",
    "AuthenticationError",
    "InboxNotFoundError",
    "DecodeError",
    "MailAssertionError",
    "EmptyInboxError",
    # Version
    "__version__",
]
