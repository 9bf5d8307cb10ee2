"""Inbox class for pytest-mailtrap."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from .errors import DecodeError, EmptyInboxError
from .types import Attachment, Message

if TYPE_CHECKING:
    from .http import ApiClient

logger = logging.getLogger("pytest_mailtrap")


@dataclass
class Inbox:
    """Represents one Mailtrap inbox.

    Every call is a fresh round trip to the API; nothing is cached.

    Attributes:
        inbox_id: The inbox identifier.
    """

    inbox_id: str
    _api_client: ApiClient = field(repr=False)

    def list_messages(self) -> list[Message]:
        """List all messages in the inbox.

        Returns:
            Messages, most recent first.
        """
        responses = self._api_client.list_messages(self.inbox_id)
        return [Message.from_response(data) for data in responses]

    def last_message(self) -> Message:
        """Get the most recently received message.

        Returns:
            The first message of the inbox listing.

        Raises:
            EmptyInboxError: If the inbox holds no message.
        """
        messages = self.list_messages()
        if not messages:
            raise EmptyInboxError(f"Inbox {self.inbox_id} is empty, no email was received")
        return messages[0]

    def get_attachments(self, message_id: Any) -> list[Attachment]:
        """Get the attachments of a message.

        Args:
            message_id: The message identifier.

        Returns:
            List of attachments, empty if the message has none.
        """
        return [
            Attachment.from_response(data)
            for data in self._api_client.get_attachments(self.inbox_id, message_id)
        ]

    def attachments_of_last_message(self) -> list[Attachment]:
        """Get the attachments of the most recently received message.

        Raises:
            EmptyInboxError: If the inbox holds no message.
            DecodeError: If the message listing carries no message ID.
        """
        message = self.last_message()
        if message.id is None:
            raise DecodeError(f"Latest message of inbox {self.inbox_id} has no id")
        return self.get_attachments(message.id)

    def clean(self) -> None:
        """Delete every message in the inbox."""
        self._api_client.clean_inbox(self.inbox_id)
        logger.info("Cleaned inbox %s", self.inbox_id)
