"""Validation utilities for pytest-mailtrap."""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

# Mailtrap inbox IDs are numeric
INBOX_ID_PATTERN = re.compile(r"^[0-9]+$")


def validate_inbox_id(inbox_id: str) -> None:
    """Validate inbox ID format.

    Args:
        inbox_id: The inbox ID to validate.

    Raises:
        ValueError: If the inbox ID format is invalid.
    """
    if not inbox_id:
        raise ValueError("Inbox ID cannot be empty")
    if not INBOX_ID_PATTERN.match(inbox_id):
        raise ValueError(
            f"Invalid inbox ID format: {inbox_id!r}. Inbox ID must contain only digits."
        )


def validate_criteria(criteria: Mapping[str, Any]) -> None:
    """Validate the expected fields passed to the matcher.

    Args:
        criteria: Field name to expected value.

    Raises:
        ValueError: If the criteria are empty or a field name is not a string.
    """
    if not criteria:
        raise ValueError("At least one expected field is required")
    for name in criteria:
        if not isinstance(name, str) or not name:
            raise ValueError(f"Invalid field name: {name!r}")
