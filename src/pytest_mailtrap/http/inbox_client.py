"""Inbox API client for pytest-mailtrap."""

from __future__ import annotations

from typing import Any

from .base_client import BaseApiClient, encode_path_segment


class InboxApiClient(BaseApiClient):
    """API client for inbox operations."""

    def get_inbox(self, inbox_id: str) -> dict[str, Any]:
        """Get inbox details.

        Args:
            inbox_id: The inbox identifier.

        Returns:
            The inbox object.
        """
        encoded = encode_path_segment(inbox_id)
        response = self._request("GET", f"inboxes/{encoded}")
        return self._decode(response, dict)

    def clean_inbox(self, inbox_id: str) -> None:
        """Delete every message in an inbox.

        Cleaning an already empty inbox is a no-op on the server side.

        Args:
            inbox_id: The inbox identifier.
        """
        encoded = encode_path_segment(inbox_id)
        self._request("PATCH", f"inboxes/{encoded}/clean")
