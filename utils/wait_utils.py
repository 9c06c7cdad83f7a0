import logging
import time
from dataclasses import dataclass
from typing import Callable, Optional

logger = logging.getLogger(__name__)

DEFAULT_POLL_INTERVAL_MS = 100


@dataclass
class WaitResult:
    """
    Outcome of a bounded wait.

    Attributes:
        success: True if the predicate held before the deadline.
        elapsed_ms: Time spent waiting, in milliseconds.
        attempts: How many times the predicate was evaluated.
        last_error: Last exception raised by the predicate, if any.
    """
    success: bool
    elapsed_ms: float
    attempts: int
    last_error: Optional[Exception] = None

    def __bool__(self):
        return self.success


def wait_until(predicate: Callable[[], bool],
               timeout_ms: float,
               poll_interval_ms: float = DEFAULT_POLL_INTERVAL_MS) -> WaitResult:
    """
    Poll a predicate until it returns a truthy value or the deadline passes.

    The predicate is always evaluated at least once, even for a zero timeout.
    An exception raised by the predicate counts as "not yet" and is kept in
    WaitResult.last_error, so a timeout can be reported with its cause.

    Args:
        predicate: Zero-argument callable checked on every poll.
        timeout_ms: Deadline in milliseconds, measured from the first poll.
        poll_interval_ms: Pause between two polls in milliseconds.

    Returns:
        WaitResult: success flag plus timing details. Never raises for a timeout.
    """
    if timeout_ms < 0:
        raise ValueError(f"timeout_ms must not be negative, got {timeout_ms}")
    if poll_interval_ms <= 0:
        raise ValueError(f"poll_interval_ms must be positive, got {poll_interval_ms}")

    start = time.monotonic()
    deadline = start + timeout_ms / 1000.0
    attempts = 0
    last_error = None

    while True:
        attempts += 1
        try:
            if predicate():
                elapsed_ms = (time.monotonic() - start) * 1000.0
                logger.debug("Condition met after %d attempt(s) in %.0f ms", attempts, elapsed_ms)
                return WaitResult(True, elapsed_ms, attempts, last_error)
        except Exception as e:
            last_error = e

        now = time.monotonic()
        if now >= deadline:
            elapsed_ms = (now - start) * 1000.0
            logger.debug("Condition not met after %d attempt(s) in %.0f ms", attempts, elapsed_ms)
            return WaitResult(False, elapsed_ms, attempts, last_error)

        time.sleep(min(poll_interval_ms / 1000.0, deadline - now))
