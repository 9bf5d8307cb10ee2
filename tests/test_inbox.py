"""Tests for Inbox class."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from fakes import FakeMailtrap

from pytest_mailtrap import MailtrapClient
from pytest_mailtrap.errors import DecodeError, EmptyInboxError, MailAssertionError
from pytest_mailtrap.inbox import Inbox
from pytest_mailtrap.types import Attachment, Message


class TestInboxWithMockApi:
    """Tests for Inbox over a mocked API client."""

    def test_list_messages_builds_messages(self) -> None:
        mock_api_client = MagicMock()
        mock_api_client.list_messages.return_value = [
            {"id": 2, "subject": "Second"},
            {"id": 1, "subject": "First"},
        ]
        inbox = Inbox(inbox_id="123456", _api_client=mock_api_client)

        messages = inbox.list_messages()

        assert all(isinstance(m, Message) for m in messages)
        assert [m.subject for m in messages] == ["Second", "First"]
        mock_api_client.list_messages.assert_called_once_with("123456")

    def test_get_attachments(self) -> None:
        mock_api_client = MagicMock()
        mock_api_client.get_attachments.return_value = [{"id": 5, "filename": "a.pdf"}]
        inbox = Inbox(inbox_id="123456", _api_client=mock_api_client)

        attachments = inbox.get_attachments(42)

        assert attachments == [Attachment(id=5, filename="a.pdf")]
        mock_api_client.get_attachments.assert_called_once_with("123456", 42)

    def test_repr_hides_api_client(self) -> None:
        inbox = Inbox(inbox_id="123456", _api_client=MagicMock())

        assert repr(inbox) == "Inbox(inbox_id='123456')"


class TestInboxWithFakeApi:
    """Tests for Inbox against the fake Mailtrap API."""

    def test_last_message_is_most_recent(
        self, client: MailtrapClient, fake_mailtrap: FakeMailtrap
    ) -> None:
        fake_mailtrap.receive(subject="First")
        fake_mailtrap.receive(subject="Second")

        assert client.inbox.last_message().subject == "Second"

    def test_last_message_of_empty_inbox(self, client: MailtrapClient) -> None:
        with pytest.raises(EmptyInboxError) as exc_info:
            client.inbox.last_message()

        assert isinstance(exc_info.value, MailAssertionError)
        assert "Inbox 123456 is empty" in str(exc_info.value)

    def test_attachments_of_last_message(
        self, client: MailtrapClient, fake_mailtrap: FakeMailtrap
    ) -> None:
        fake_mailtrap.receive(subject="With files", attachments=2)
        latest = fake_mailtrap.receive(subject="Without files")

        assert client.inbox.attachments_of_last_message() == []
        assert fake_mailtrap.requests[-1].url.path.endswith(
            f"/messages/{latest['id']}/attachments"
        )

    def test_clean_then_list_is_empty(
        self, client: MailtrapClient, fake_mailtrap: FakeMailtrap
    ) -> None:
        fake_mailtrap.receive(subject="Hi")

        client.inbox.clean()

        assert client.inbox.list_messages() == []
        assert fake_mailtrap.requests[0].method == "PATCH"

    def test_clean_is_idempotent(self, client: MailtrapClient) -> None:
        client.inbox.clean()
        client.inbox.clean()

        assert client.inbox.list_messages() == []

    def test_non_object_message_raises_decode_error(
        self, client: MailtrapClient, fake_mailtrap: FakeMailtrap
    ) -> None:
        fake_mailtrap.receive(subject="Hi")
        fake_mailtrap.messages.append("not-an-object")  # type: ignore[arg-type]

        with pytest.raises(DecodeError):
            client.inbox.list_messages()

    def test_attachments_of_last_message_without_id(
        self, client: MailtrapClient, fake_mailtrap: FakeMailtrap
    ) -> None:
        """Test a latest message lacking an id does not hit the attachments endpoint."""
        fake_mailtrap.messages.insert(0, {"subject": "No id"})

        with pytest.raises(DecodeError) as exc_info:
            client.inbox.attachments_of_last_message()

        assert "has no id" in str(exc_info.value)
        assert not any(r.url.path.endswith("/attachments") for r in fake_mailtrap.requests)
