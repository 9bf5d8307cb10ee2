"""Utility functions for pytest-mailtrap."""

from .sleep import sleep
from .validation import validate_criteria, validate_inbox_id

__all__ = ["sleep", "validate_criteria", "validate_inbox_id"]
