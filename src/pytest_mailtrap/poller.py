"""Polling matcher for pytest-mailtrap."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from typing import TYPE_CHECKING

from .constants import DEFAULT_WAIT_SECONDS
from .errors import MailAssertionError
from .matcher import describe_mismatch, find_match
from .types import ExpectedCriteria, MatchResult, Message, PollingConfig
from .utils import sleep as default_sleep
from .utils import validate_criteria

if TYPE_CHECKING:
    from .inbox import Inbox

logger = logging.getLogger("pytest_mailtrap")

# Seconds, monotonic
Clock = Callable[[], float]
# Milliseconds
Sleeper = Callable[[float], None]


class Poller:
    """Waits for a message matching a set of expected field values.

    The inbox is fetched in full on every iteration, with a fixed delay
    between fetches, until a message matches every field or the wait
    window closes. Errors raised by the API client are not retried.
    """

    def __init__(
        self,
        inbox: Inbox,
        config: PollingConfig | None = None,
        *,
        clock: Clock = time.monotonic,
        sleep: Sleeper = default_sleep,
    ) -> None:
        """Initialize the poller.

        Args:
            inbox: The inbox to fetch messages from.
            config: Polling configuration options.
            clock: Returns the current time in seconds.
            sleep: Blocks for the given number of milliseconds.
        """
        self._inbox = inbox
        self._config = config or PollingConfig()
        self._clock = clock
        self._sleep = sleep

    def wait_for_match(
        self,
        criteria: ExpectedCriteria,
        max_wait_seconds: float = DEFAULT_WAIT_SECONDS,
    ) -> Message:
        """Poll the inbox until a message matches every criterion field.

        Args:
            criteria: Field name to expected value. Not modified.
            max_wait_seconds: Length of the wait window.

        Returns:
            The first message matching every field.

        Raises:
            ValueError: If ``criteria`` is empty.
            MailAssertionError: If no message matched before the deadline.
        """
        validate_criteria(criteria)
        deadline = self._clock() + max_wait_seconds
        closest: MatchResult | None = None
        attempt = 0

        while True:
            attempt += 1
            messages = self._inbox.list_messages()
            match, candidate = find_match(messages, criteria)
            if match is not None:
                logger.info("Found matching email %s after %d attempt(s)", match.id, attempt)
                return match

            if candidate is not None and (closest is None or candidate.count > closest.count):
                closest = candidate
            logger.debug(
                "Attempt %d: no match among %d email(s), closest matched %d/%d field(s)",
                attempt,
                len(messages),
                closest.count if closest else 0,
                len(criteria),
            )

            remaining = deadline - self._clock()
            if remaining <= 0:
                break
            self._sleep(min(self._config.interval, remaining * 1000))

        raise self._failure(criteria, closest)

    def _failure(
        self, criteria: ExpectedCriteria, closest: MatchResult | None
    ) -> MailAssertionError:
        """Build the assertion error raised when the wait window closes."""
        missing = closest.missing(criteria) if closest else list(criteria)
        diagnostics = describe_mismatch(criteria, closest)
        logger.debug("Email not found.\n%s", diagnostics)
        return MailAssertionError(
            "Failed asserting that the specified e-mail exists. "
            f"Could not find matching: {', '.join(missing)}\n{diagnostics}"
        )
