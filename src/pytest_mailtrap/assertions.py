"""Email assertions for pytest-mailtrap."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .constants import DEFAULT_WAIT_SECONDS
from .errors import MailAssertionError
from .inbox import Inbox
from .poller import Poller
from .types import Attachment, ExpectedCriteria, Message


def assert_equal(expected: Any, actual: Any, description: str) -> None:
    """Raise MailAssertionError unless ``actual == expected``."""
    if expected != actual:
        raise MailAssertionError(
            f"Failed asserting that {description} {actual!r} equals expected {expected!r}"
        )


def assert_contains(needle: str, haystack: str | None, description: str) -> None:
    """Raise MailAssertionError unless ``needle`` is a substring of ``haystack``."""
    if haystack is None or needle not in haystack:
        raise MailAssertionError(
            f"Failed asserting that {description} {haystack!r} contains {needle!r}"
        )


class MailtrapAssertions:
    """Assertions on the emails captured by a Mailtrap inbox.

    Every ``receive_*`` and ``see_*`` method checks the most recently
    received email once, without retrying. ``have_email_within_inbox``
    is the only one that waits for delivery.

    Example:
        ```python
        def test_welcome_email(mailtrap):
            register_user("jane@example.com")
            mailtrap.have_email_within_inbox(
                {"to_email": "jane@example.com", "subject": "Welcome"}
            )
            mailtrap.see_in_email_text_body("Confirm your address")
        ```
    """

    def __init__(
        self,
        inbox: Inbox,
        poller: Poller | None = None,
        wait: float = DEFAULT_WAIT_SECONDS,
    ) -> None:
        """Initialize the assertions.

        Args:
            inbox: The inbox to assert on.
            poller: Poller used by ``have_email_within_inbox``.
            wait: Default wait window in seconds.
        """
        self.inbox = inbox
        self._poller = poller or Poller(inbox)
        self._wait = wait

    # Inbox access

    def clean_inbox(self) -> None:
        """Delete every message from the inbox."""
        self.inbox.clean()

    def fetch_all_messages(self) -> list[Message]:
        """Get all messages from the inbox, most recent first."""
        return self.inbox.list_messages()

    def fetch_last_message(self) -> Message:
        """Get the most recent message of the inbox."""
        return self.inbox.last_message()

    def fetch_attachments_of_last_message(self) -> list[Attachment]:
        """Get the attachments of the most recent message."""
        return self.inbox.attachments_of_last_message()

    # Assertions on the last message

    def receive_an_email(self, params: Mapping[str, Any]) -> None:
        """Check that the latest email has every field in ``params``.

        Args:
            params: Field name to expected value.
        """
        message = self.fetch_last_message()
        for name, value in params.items():
            assert_equal(value, message.get(name), f"email field {name!r}")

    def receive_an_email_from_email(self, sender_email: str) -> None:
        """Check that the latest email was sent from ``sender_email``."""
        assert_equal(sender_email, self.fetch_last_message().from_email, "sender email")

    def receive_an_email_from_name(self, sender_name: str) -> None:
        """Check that the latest email was sent by ``sender_name``."""
        assert_equal(sender_name, self.fetch_last_message().from_name, "sender name")

    def receive_an_email_to_email(self, recipient_email: str) -> None:
        """Check that the latest email was sent to ``recipient_email``."""
        assert_equal(recipient_email, self.fetch_last_message().to_email, "recipient email")

    def receive_an_email_to_name(self, recipient_name: str) -> None:
        """Check that the latest email was sent to ``recipient_name``."""
        assert_equal(recipient_name, self.fetch_last_message().to_name, "recipient name")

    def receive_an_email_with_subject(self, subject: str) -> None:
        """Check the subject of the latest email."""
        assert_equal(subject, self.fetch_last_message().subject, "subject")

    def receive_an_email_with_text_body(self, text_body: str) -> None:
        """Check the text body of the latest email."""
        assert_equal(text_body, self.fetch_last_message().text_body, "text body")

    def receive_an_email_with_html_body(self, html_body: str) -> None:
        """Check the HTML body of the latest email, whitespace included."""
        assert_equal(html_body, self.fetch_last_message().html_body, "HTML body")

    def see_in_email_text_body(self, expected: str) -> None:
        """Look for a string in the text body of the latest email."""
        assert_contains(expected, self.fetch_last_message().text_body, "text body")

    def see_in_email_html_body(self, expected: str) -> None:
        """Look for a string in the HTML body of the latest email."""
        assert_contains(expected, self.fetch_last_message().html_body, "HTML body")

    def see_attachments(self, count: int) -> None:
        """Check the number of attachments on the latest email."""
        attachments = self.fetch_attachments_of_last_message()
        assert_equal(count, len(attachments), "attachment count")

    def see_an_attachment(self, expected: bool = True) -> None:
        """Check whether the latest email has at least one attachment."""
        attachments = self.fetch_attachments_of_last_message()
        assert_equal(expected, len(attachments) > 0, "has attachments")

    # Assertion on the whole inbox

    def have_email_within_inbox(
        self,
        criteria: ExpectedCriteria,
        wait: float | None = None,
    ) -> Message:
        """Check that some email in the inbox has every field in ``criteria``.

        The inbox is polled until a matching email shows up or ``wait``
        seconds have passed. ``html_body`` is compared with all whitespace
        removed; every other field must be equal.

        Args:
            criteria: Field name to expected value.
            wait: Wait window in seconds. Defaults to the configured one.

        Returns:
            The matching email.

        Raises:
            MailAssertionError: If no email matched within the wait window.
        """
        return self._poller.wait_for_match(criteria, self._wait if wait is None else wait)
