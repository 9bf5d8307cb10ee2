"""pytest plugin exposing Mailtrap assertions as fixtures.

Configuration is read, in order of precedence, from the command line,
the environment (a ``.env`` file at the rootdir is loaded first) and
the ini file:

==========================  ======================  ======================
command line                environment             ini
==========================  ======================  ======================
``--mailtrap-api-token``    ``MAILTRAP_API_TOKEN``  ``mailtrap_api_token``
``--mailtrap-inbox-id``     ``MAILTRAP_INBOX_ID``   ``mailtrap_inbox_id``
``--mailtrap-base-url``     ``MAILTRAP_BASE_URL``   ``mailtrap_base_url``
``--mailtrap-no-cleanup``                           ``mailtrap_cleanup``
                                                    ``mailtrap_wait``
==========================  ======================  ======================
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from dataclasses import dataclass
from typing import cast

import pytest
from dotenv import load_dotenv

from .assertions import MailtrapAssertions
from .client import MailtrapClient
from .constants import DEFAULT_BASE_URL, DEFAULT_WAIT_SECONDS
from .errors import ConfigError

logger = logging.getLogger("pytest_mailtrap")

NO_CLEANUP_MARKER = "mailtrap_no_cleanup"


@dataclass(frozen=True)
class MailtrapSettings:
    """Plugin settings resolved from pytest options, environment and ini.

    Attributes:
        api_token: Mailtrap API token.
        inbox_id: Identifier of the inbox to assert on.
        base_url: Base URL for the Mailtrap API.
        cleanup: Whether the inbox is cleaned after each test.
        wait: Default wait window of ``have_email_within_inbox`` in seconds.
    """

    api_token: str | None
    inbox_id: str | None
    base_url: str = DEFAULT_BASE_URL
    cleanup: bool = True
    wait: float = DEFAULT_WAIT_SECONDS

    @classmethod
    def from_pytest_config(cls, config: pytest.Config) -> MailtrapSettings:
        """Resolve the settings of a pytest run."""

        def resolve(name: str, env_var: str) -> str | None:
            value = config.getoption(name) or os.getenv(env_var) or config.getini(name)
            return value or None

        raw_wait = config.getini("mailtrap_wait") or DEFAULT_WAIT_SECONDS
        try:
            wait = float(raw_wait)
        except ValueError as e:
            raise ConfigError(
                f"mailtrap_wait must be a number of seconds, got {raw_wait!r}"
            ) from e

        return cls(
            api_token=resolve("mailtrap_api_token", "MAILTRAP_API_TOKEN"),
            inbox_id=resolve("mailtrap_inbox_id", "MAILTRAP_INBOX_ID"),
            base_url=resolve("mailtrap_base_url", "MAILTRAP_BASE_URL") or DEFAULT_BASE_URL,
            cleanup=bool(config.getini("mailtrap_cleanup"))
            and not config.getoption("mailtrap_no_cleanup"),
            wait=wait,
        )

    def require(self) -> tuple[str, str]:
        """Check that the settings needed to reach Mailtrap are present.

        Returns:
            The API token and the inbox ID.

        Raises:
            ConfigError: If the API token or the inbox ID is missing.
        """
        missing = [
            name
            for name, value in (("api token", self.api_token), ("inbox id", self.inbox_id))
            if not value
        ]
        if missing:
            raise ConfigError(
                f"Mailtrap {' and '.join(missing)} not configured. Use --mailtrap-api-token/"
                "--mailtrap-inbox-id, MAILTRAP_API_TOKEN/MAILTRAP_INBOX_ID or the ini file."
            )
        return cast(str, self.api_token), cast(str, self.inbox_id)


def pytest_addoption(parser: pytest.Parser) -> None:
    group = parser.getgroup("mailtrap", "Mailtrap email assertions")
    group.addoption(
        "--mailtrap-api-token",
        dest="mailtrap_api_token",
        default=None,
        help="Mailtrap API token.",
    )
    group.addoption(
        "--mailtrap-inbox-id",
        dest="mailtrap_inbox_id",
        default=None,
        help="Identifier of the Mailtrap inbox to assert on.",
    )
    group.addoption(
        "--mailtrap-base-url",
        dest="mailtrap_base_url",
        default=None,
        help=f"Mailtrap API base URL (default: {DEFAULT_BASE_URL}).",
    )
    group.addoption(
        "--mailtrap-no-cleanup",
        dest="mailtrap_no_cleanup",
        action="store_true",
        default=False,
        help="Keep the inbox content after each test.",
    )
    parser.addini("mailtrap_api_token", "Mailtrap API token.")
    parser.addini("mailtrap_inbox_id", "Identifier of the Mailtrap inbox to assert on.")
    parser.addini("mailtrap_base_url", "Mailtrap API base URL.")
    parser.addini(
        "mailtrap_cleanup",
        "Clean the Mailtrap inbox after each test (default: true).",
        type="bool",
        default=True,
    )
    parser.addini(
        "mailtrap_wait",
        f"Seconds have_email_within_inbox waits for an email (default: {DEFAULT_WAIT_SECONDS}).",
    )


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers", f"{NO_CLEANUP_MARKER}: keep the Mailtrap inbox content after this test"
    )
    load_dotenv(config.rootpath / ".env")


@pytest.fixture(scope="session")
def mailtrap_settings(pytestconfig: pytest.Config) -> MailtrapSettings:
    """Mailtrap settings of this test run."""
    return MailtrapSettings.from_pytest_config(pytestconfig)


@pytest.fixture(scope="session")
def mailtrap_client(mailtrap_settings: MailtrapSettings) -> Iterator[MailtrapClient]:
    """Mailtrap client shared by the whole test session."""
    api_token, inbox_id = mailtrap_settings.require()
    with MailtrapClient(
        api_token=api_token,
        inbox_id=inbox_id,
        base_url=mailtrap_settings.base_url,
        wait=mailtrap_settings.wait,
    ) as client:
        yield client


@pytest.fixture
def mailtrap(
    request: pytest.FixtureRequest,
    mailtrap_client: MailtrapClient,
    mailtrap_settings: MailtrapSettings,
) -> Iterator[MailtrapAssertions]:
    """Mailtrap assertions; the inbox is cleaned after the test unless disabled."""
    yield mailtrap_client.assertions

    if not mailtrap_settings.cleanup or request.node.get_closest_marker(NO_CLEANUP_MARKER):
        logger.debug("Skipping cleanup of inbox %s", mailtrap_client.inbox.inbox_id)
        return
    mailtrap_client.assertions.clean_inbox()
