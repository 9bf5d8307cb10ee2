"""Type definitions for pytest-mailtrap."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from typing import Any, TypedDict

from .constants import DEFAULT_BASE_URL, DEFAULT_POLL_INTERVAL_MS, DEFAULT_TIMEOUT_MS

# Caller-supplied field name -> expected value
ExpectedCriteria = Mapping[str, Any]


@dataclass(frozen=True)
class ClientConfig:
    """Configuration for MailtrapClient.

    Attributes:
        api_token: Mailtrap API token, sent with every request.
        inbox_id: Identifier of the inbox the tests assert on.
        base_url: Base URL for the Mailtrap API.
        timeout: HTTP request timeout in milliseconds.
    """

    api_token: str
    inbox_id: str
    base_url: str = DEFAULT_BASE_URL
    timeout: int = DEFAULT_TIMEOUT_MS


@dataclass(frozen=True)
class PollingConfig:
    """Configuration for the inbox poller.

    Attributes:
        interval: Delay between two inbox fetches in milliseconds.
    """

    interval: int = DEFAULT_POLL_INTERVAL_MS


class MessageResponse(TypedDict, total=False):
    """Message object as returned by ``GET inboxes/{id}/messages``."""

    id: int
    inbox_id: int
    subject: str
    sent_at: str
    from_email: str
    from_name: str
    to_email: str
    to_name: str
    text_body: str
    html_body: str
    is_read: bool
    html_body_size: int
    text_body_size: int


class AttachmentResponse(TypedDict, total=False):
    """Attachment object as returned by ``GET .../messages/{id}/attachments``."""

    id: int
    message_id: int
    filename: str
    attachment_type: str
    content_type: str
    content_id: str
    transfer_encoding: str
    attachment_size: int
    download_path: str


def _split_known(cls: type, data: Mapping[str, Any]) -> tuple[dict[str, Any], dict[str, Any]]:
    """Split a JSON object into dataclass keyword arguments and leftover fields."""
    names = {f.name for f in fields(cls)} - {"extra"}
    known = {key: value for key, value in data.items() if key in names}
    extra = {key: value for key, value in data.items() if key not in names}
    return known, extra


@dataclass(frozen=True)
class Message:
    """A captured email, as a snapshot of one API fetch.

    Every field is optional: the API omits some of them depending on the
    account plan and API version. Fields the API returns that are not
    modelled here are kept in ``extra``.

    Attributes:
        id: Message identifier.
        inbox_id: Identifier of the inbox holding the message.
        subject: Subject line.
        sent_at: ISO 8601 timestamp of delivery.
        from_email: Sender address.
        from_name: Sender display name.
        to_email: Recipient address.
        to_name: Recipient display name.
        text_body: Plain text body.
        html_body: HTML body.
        is_read: Whether the message was opened in the Mailtrap UI.
        html_body_size: HTML body size in bytes.
        text_body_size: Text body size in bytes.
        extra: Any other field returned by the API.
    """

    id: Any = None
    inbox_id: Any = None
    subject: str | None = None
    sent_at: str | None = None
    from_email: str | None = None
    from_name: str | None = None
    to_email: str | None = None
    to_name: str | None = None
    text_body: str | None = None
    html_body: str | None = None
    is_read: bool | None = None
    html_body_size: int | None = None
    text_body_size: int | None = None
    extra: dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_response(cls, data: Mapping[str, Any]) -> Message:
        """Build a Message from an API message object.

        Args:
            data: The decoded JSON object.

        Returns:
            A new Message.
        """
        known, extra = _split_known(cls, data)
        return cls(**known, extra=extra)

    def get(self, name: str, default: Any = None) -> Any:
        """Look up a field by its API name.

        Args:
            name: Field name, modelled or not.
            default: Value returned when the message has no such field.

        Returns:
            The field value, or ``default``.
        """
        if name != "extra" and name in self.__dataclass_fields__:
            value = getattr(self, name)
            return default if value is None else value
        return self.extra.get(name, default)


@dataclass(frozen=True)
class Attachment:
    """A file attached to a captured email.

    Attributes:
        id: Attachment identifier.
        message_id: Identifier of the owning message.
        filename: Attachment filename.
        attachment_type: ``attachment`` or ``inline``.
        content_type: MIME content type.
        content_id: Content ID for inline attachments.
        transfer_encoding: Content transfer encoding.
        attachment_size: Size in bytes.
        download_path: API path to download the raw content.
        extra: Any other field returned by the API.
    """

    id: Any = None
    message_id: Any = None
    filename: str | None = None
    attachment_type: str | None = None
    content_type: str | None = None
    content_id: str | None = None
    transfer_encoding: str | None = None
    attachment_size: int | None = None
    download_path: str | None = None
    extra: dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_response(cls, data: Mapping[str, Any]) -> Attachment:
        """Build an Attachment from an API attachment object."""
        known, extra = _split_known(cls, data)
        return cls(**known, extra=extra)


@dataclass(frozen=True)
class MatchResult:
    """Which criterion fields one message satisfied.

    Attributes:
        message: The message that was compared.
        matched: Criterion fields the message matched, in criteria order.
    """

    message: Message
    matched: tuple[str, ...] = ()

    @property
    def count(self) -> int:
        """Number of matched criterion fields."""
        return len(self.matched)

    def is_full_match(self, criteria: ExpectedCriteria) -> bool:
        """Check whether every criterion field matched."""
        return self.count == len(criteria)

    def missing(self, criteria: ExpectedCriteria) -> list[str]:
        """Criterion fields this message did not match, in criteria order."""
        return [name for name in criteria if name not in self.matched]
