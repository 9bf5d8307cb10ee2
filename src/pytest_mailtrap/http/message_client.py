"""Message API client for pytest-mailtrap."""

from __future__ import annotations

from typing import cast

from ..types import AttachmentResponse, MessageResponse
from .base_client import BaseApiClient, encode_path_segment


class MessageApiClient(BaseApiClient):
    """API client for message operations.

    Provides methods for listing messages and their attachments.
    """

    def list_messages(self, inbox_id: str) -> list[MessageResponse]:
        """List all messages in an inbox, most recent first.

        Args:
            inbox_id: The inbox identifier.

        Returns:
            List of message objects in the order the API returns them.
        """
        encoded = encode_path_segment(inbox_id)
        response = self._request("GET", f"inboxes/{encoded}/messages")
        return cast(list[MessageResponse], self._decode_objects(response))

    def get_attachments(self, inbox_id: str, message_id: str | int) -> list[AttachmentResponse]:
        """List the attachments of a message.

        Args:
            inbox_id: The inbox identifier.
            message_id: The message identifier.

        Returns:
            List of attachment objects.
        """
        encoded_inbox = encode_path_segment(inbox_id)
        encoded_id = encode_path_segment(message_id)
        response = self._request(
            "GET", f"inboxes/{encoded_inbox}/messages/{encoded_id}/attachments"
        )
        return cast(list[AttachmentResponse], self._decode_objects(response))
