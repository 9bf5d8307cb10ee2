"""Tests for MailtrapClient."""

from __future__ import annotations

from unittest.mock import MagicMock

import httpx
import pytest
from fakes import TEST_TOKEN, FakeMailtrap

from pytest_mailtrap import MailtrapClient
from pytest_mailtrap.errors import InboxNotFoundError


class TestClientInitialization:
    """Tests for client construction."""

    def test_default_configuration(self) -> None:
        client = MailtrapClient(api_token="token", inbox_id="123456")

        assert client.config.api_token == "token"
        assert client.config.inbox_id == "123456"
        assert client.config.base_url == "https://mailtrap.io/api/v1/"
        assert client.config.timeout == 30000
        assert client.inbox.inbox_id == "123456"
        assert client.assertions._wait == 5
        assert client.assertions._poller._config.interval == 500

    def test_custom_configuration(self) -> None:
        client = MailtrapClient(
            api_token="token",
            inbox_id=42,
            base_url="https://mailtrap.example.com/api/v1/",
            timeout=1000,
            polling_interval=100,
            wait=10,
        )

        assert client.config.inbox_id == "42"
        assert client.config.base_url == "https://mailtrap.example.com/api/v1/"
        assert client.config.timeout == 1000
        assert client.assertions._wait == 10
        assert client.assertions._poller._config.interval == 100

    @pytest.mark.parametrize("inbox_id", ["", "abc", "12/34"])
    def test_invalid_inbox_id(self, inbox_id: str) -> None:
        with pytest.raises(ValueError):
            MailtrapClient(api_token="token", inbox_id=inbox_id)

    def test_shared_api_client(self) -> None:
        """Test the inbox and the assertions use the client's connection."""
        client = MailtrapClient(api_token="token", inbox_id="1")

        assert client.inbox._api_client is client._api_client
        assert client.assertions.inbox is client.inbox


class TestClientLifecycle:
    """Tests for closing the client."""

    def test_context_manager_closes(self) -> None:
        with MailtrapClient(api_token="token", inbox_id="1") as client:
            client._api_client.close = MagicMock()  # type: ignore[method-assign]

        client._api_client.close.assert_called_once()

    def test_close_releases_connection(
        self, client: MailtrapClient, fake_mailtrap: FakeMailtrap
    ) -> None:
        client.inbox.list_messages()
        http_client = client._api_client._client
        assert http_client is not None

        client.close()

        assert http_client.is_closed


class TestCheckToken:
    """Tests for check_token."""

    def test_valid_token(self, client: MailtrapClient, fake_mailtrap: FakeMailtrap) -> None:
        assert client.check_token() is True
        assert fake_mailtrap.requests[0].url.path == "/api/v1/inboxes/123456"

    def test_invalid_token(
        self, fake_mailtrap: FakeMailtrap, mock_transport: httpx.MockTransport
    ) -> None:
        with MailtrapClient(api_token="wrong", inbox_id=fake_mailtrap.inbox_id) as client:
            assert client.check_token() is False

    def test_unknown_inbox_raises(
        self, fake_mailtrap: FakeMailtrap, mock_transport: httpx.MockTransport
    ) -> None:
        """Test errors other than authentication are not hidden."""
        with MailtrapClient(api_token=TEST_TOKEN, inbox_id="999") as client:
            with pytest.raises(InboxNotFoundError):
                client.check_token()
