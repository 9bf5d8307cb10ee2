"""Shared fixtures for pytest-mailtrap tests."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any
from unittest.mock import patch

import httpx
import pytest
from fakes import TEST_TOKEN, FakeClock, FakeMailtrap

from pytest_mailtrap import MailtrapClient

pytest_plugins = ["pytester"]


@pytest.fixture
def fake_mailtrap() -> FakeMailtrap:
    """A fake Mailtrap API with an empty inbox."""
    return FakeMailtrap()


@pytest.fixture
def mock_transport(fake_mailtrap: FakeMailtrap) -> Iterator[httpx.MockTransport]:
    """Route every httpx.Client created by the SDK to the fake API."""
    transport = httpx.MockTransport(fake_mailtrap.handler)
    real_client = httpx.Client

    def make_client(**kwargs: Any) -> httpx.Client:
        return real_client(transport=transport, **kwargs)

    with patch.object(httpx, "Client", side_effect=make_client):
        yield transport


@pytest.fixture
def client(
    fake_mailtrap: FakeMailtrap, mock_transport: httpx.MockTransport
) -> Iterator[MailtrapClient]:
    """A MailtrapClient talking to the fake API."""
    with MailtrapClient(
        api_token=TEST_TOKEN,
        inbox_id=fake_mailtrap.inbox_id,
        polling_interval=10,
        wait=0,
    ) as mailtrap_client:
        yield mailtrap_client


@pytest.fixture
def clock() -> FakeClock:
    """A fake clock starting at t=1000s."""
    return FakeClock()
