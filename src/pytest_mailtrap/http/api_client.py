"""Unified HTTP API client for pytest-mailtrap."""

from __future__ import annotations

from .base_client import BaseApiClient, encode_path_segment
from .inbox_client import InboxApiClient
from .message_client import MessageApiClient


class ApiClient(InboxApiClient, MessageApiClient):
    """HTTP client exposing every Mailtrap operation the plugin uses.

    All domain clients share the connection created by BaseApiClient.
    """

    pass


__all__ = [
    "ApiClient",
    "BaseApiClient",
    "InboxApiClient",
    "MessageApiClient",
    "encode_path_segment",
]
