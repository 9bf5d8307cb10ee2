"""Sleep utility for pytest-mailtrap."""

import time


def sleep(ms: int) -> None:
    """Sleep for the specified number of milliseconds.

    Args:
        ms: Number of milliseconds to sleep.
    """
    time.sleep(ms / 1000)
