"""Error hierarchy for pytest-mailtrap."""

from __future__ import annotations


class MailtrapError(Exception):
    """Base exception for all pytest-mailtrap errors."""

    pass


class ConfigError(MailtrapError):
    """Missing or invalid plugin configuration."""

    pass


class NetworkError(MailtrapError):
    """Network communication failure (connection refused, timeout, ...)."""

    pass


class ApiError(MailtrapError):
    """HTTP API error with status code.

    Attributes:
        status_code: The HTTP status code.
        message: The error message.
    """

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(f"API Error ({status_code}): {message}")


class AuthenticationError(ApiError):
    """API token rejected (401/403)."""

    pass


class InboxNotFoundError(ApiError):
    """Inbox or message not found (404)."""

    pass


class DecodeError(MailtrapError):
    """Response body is not the JSON document the endpoint should return."""

    pass


class MailAssertionError(MailtrapError, AssertionError):
    """An expectation about the captured emails did not hold.

    Subclasses AssertionError so pytest reports it as a test failure
    rather than an error.
    """

    pass


class EmptyInboxError(MailAssertionError):
    """The inbox holds no message to assert on."""

    pass
