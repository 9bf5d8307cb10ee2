"""HTTP client for pytest-mailtrap.

This module provides HTTP clients for the Mailtrap API:
- ApiClient: Unified client with all operations
- BaseApiClient: Common HTTP operations and error mapping
- InboxApiClient: Inbox operations
- MessageApiClient: Message and attachment operations
"""

from .api_client import (
    ApiClient,
    BaseApiClient,
    InboxApiClient,
    MessageApiClient,
    encode_path_segment,
)

__all__ = [
    "ApiClient",
    "BaseApiClient",
    "InboxApiClient",
    "MessageApiClient",
    "encode_path_segment",
]
