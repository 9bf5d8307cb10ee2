"""MailtrapClient - Main entry point for pytest-mailtrap."""

from __future__ import annotations

import logging
from typing import Any

from .assertions import MailtrapAssertions
from .constants import (
    DEFAULT_BASE_URL,
    DEFAULT_POLL_INTERVAL_MS,
    DEFAULT_TIMEOUT_MS,
    DEFAULT_WAIT_SECONDS,
)
from .errors import AuthenticationError
from .http import ApiClient
from .inbox import Inbox
from .poller import Poller
from .types import ClientConfig, PollingConfig
from .utils import validate_inbox_id

logger = logging.getLogger("pytest_mailtrap")


class MailtrapClient:
    """Main client for asserting on a Mailtrap inbox.

    Owns the HTTP connection to the Mailtrap API. The configuration is
    fixed at construction.

    Example:
        ```python
        with MailtrapClient(api_token="your-token", inbox_id="123456") as client:
            client.assertions.have_email_within_inbox({"subject": "Welcome"})
            client.inbox.clean()
        ```
    """

    def __init__(
        self,
        api_token: str,
        inbox_id: str | int,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: int = DEFAULT_TIMEOUT_MS,
        polling_interval: int = DEFAULT_POLL_INTERVAL_MS,
        wait: float = DEFAULT_WAIT_SECONDS,
    ) -> None:
        """Initialize the Mailtrap client.

        Args:
            api_token: Mailtrap API token.
            inbox_id: Identifier of the inbox to assert on.
            base_url: Base URL for the Mailtrap API.
            timeout: HTTP request timeout in milliseconds.
            polling_interval: Delay between inbox fetches in milliseconds.
            wait: Default wait window of ``have_email_within_inbox`` in seconds.

        Raises:
            ValueError: If the inbox ID is not a Mailtrap inbox ID.
        """
        inbox_id = str(inbox_id)
        validate_inbox_id(inbox_id)
        self._config = ClientConfig(
            api_token=api_token,
            inbox_id=inbox_id,
            base_url=base_url,
            timeout=timeout,
        )
        self._polling_config = PollingConfig(interval=polling_interval)
        self._api_client = ApiClient(self._config)
        self.inbox = Inbox(inbox_id=inbox_id, _api_client=self._api_client)
        self.assertions = MailtrapAssertions(
            self.inbox,
            Poller(self.inbox, self._polling_config),
            wait=wait,
        )

    def __enter__(self) -> MailtrapClient:
        """Enter context manager."""
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Exit context manager."""
        self.close()

    @property
    def config(self) -> ClientConfig:
        """The client configuration."""
        return self._config

    def close(self) -> None:
        """Close the HTTP connection."""
        self._api_client.close()

    def check_token(self) -> bool:
        """Check that the API token grants access to the configured inbox.

        Returns:
            True if the inbox could be read with the token.
        """
        try:
            self._api_client.get_inbox(self._config.inbox_id)
        except AuthenticationError as e:
            logger.warning("Mailtrap rejected the API token: %s", e)
            return False
        return True
