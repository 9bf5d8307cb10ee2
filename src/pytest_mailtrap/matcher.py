"""Field matching between expected values and captured messages."""

from __future__ import annotations

import re
from collections.abc import Iterable
from typing import Any

from .constants import HTML_BODY_FIELD
from .types import ExpectedCriteria, MatchResult, Message

_WHITESPACE_PATTERN = re.compile(r"\s+")

# Marks a field the closest message does not have at all
_MISSING = object()


def normalize_html_body(value: str) -> str:
    """Drop trailing whitespace, then every remaining whitespace run.

    Mailtrap appends a newline to HTML bodies and may reflow their markup,
    so HTML bodies are compared with all whitespace removed.

    Args:
        value: An HTML body.

    Returns:
        The body without any whitespace.
    """
    return _WHITESPACE_PATTERN.sub("", value.rstrip())


def field_matches(name: str, expected: Any, actual: Any) -> bool:
    """Compare one criterion value with the message value.

    A missing message field (``None``) never matches.
    """
    if actual is None:
        return False
    if name == HTML_BODY_FIELD and isinstance(expected, str) and isinstance(actual, str):
        return normalize_html_body(expected) == normalize_html_body(actual)
    return bool(expected == actual)


def match_message(message: Message, criteria: ExpectedCriteria) -> MatchResult:
    """Compute which criterion fields a message satisfies.

    Args:
        message: The message to check.
        criteria: Field name to expected value. Not modified.

    Returns:
        MatchResult listing the matched fields in criteria order.
    """
    matched = tuple(
        name
        for name, expected in criteria.items()
        if field_matches(name, expected, message.get(name))
    )
    return MatchResult(message=message, matched=matched)


def find_match(
    messages: Iterable[Message], criteria: ExpectedCriteria
) -> tuple[Message | None, MatchResult | None]:
    """Look for a message matching every criterion field.

    Messages are scanned in the given order. When none matches fully, the
    message with the most matched fields is kept as the closest match; on a
    tie the first one scanned wins.

    Args:
        messages: Messages to scan, most recent first.
        criteria: Field name to expected value.

    Returns:
        A ``(match, closest)`` pair. ``match`` is the first full match or
        None; ``closest`` is None only when there was no message at all.
    """
    closest: MatchResult | None = None
    for message in messages:
        result = match_message(message, criteria)
        if result.is_full_match(criteria):
            return message, result
        if closest is None or result.count > closest.count:
            closest = result
    return None, closest


def describe_mismatch(criteria: ExpectedCriteria, closest: MatchResult | None) -> str:
    """Build diagnostics for the fields the closest message did not match.

    Args:
        criteria: Field name to expected value.
        closest: The closest match, or None when the inbox was empty.

    Returns:
        One block per unmatched field with expected and actual values and lengths.
    """
    if closest is None:
        return "No email was found in the inbox."

    lines = [f"Closest matching email (id={closest.message.id}):"]
    for name in closest.missing(criteria):
        expected = criteria[name]
        actual = closest.message.get(name, _MISSING)
        lines.append(f"  {name}:")
        lines.append(f"    expected ({_length(expected)}): {expected!r}")
        if actual is _MISSING:
            lines.append("    actual: missing")
        else:
            lines.append(f"    actual ({_length(actual)}): {actual!r}")
    return "\n".join(lines)


def _length(value: Any) -> str:
    return f"len={len(value)}" if isinstance(value, str) else type(value).__name__
