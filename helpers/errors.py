"""Exceptions raised by the UI check helpers."""

from typing import Optional, Sequence

from utils.wait_utils import WaitResult


class UiCheckError(Exception):
    """Base exception for all UI check failures."""

    pass


class SessionSetupError(UiCheckError):
    """Browser session could not be started or the login step failed."""

    def __init__(self, variant: str, message: str):
        self.variant = variant
        super().__init__(f"[{variant}] Session setup failed: {message}")


class WaitTimeoutError(UiCheckError):
    """An expected page state did not occur within its timeout."""

    def __init__(self, message: str, timeout_ms: float, result: Optional[WaitResult] = None):
        self.timeout_ms = timeout_ms
        self.result = result
        details = f"{message} (timeout {timeout_ms:.0f} ms"
        if result is not None:
            details += f", {result.attempts} attempt(s)"
            if result.last_error is not None:
                details += f", last error: {result.last_error}"
        super().__init__(details + ")")


class RegionTimeoutError(WaitTimeoutError):
    """A named page region was not present and visible in time."""

    def __init__(self, region: str, selector: str, message: str,
                 timeout_ms: float, result: Optional[WaitResult] = None):
        self.region = region
        self.selector = selector
        super().__init__(f"{message} [region '{region}', selector '{selector}']", timeout_ms, result)


class SortConvergenceError(WaitTimeoutError):
    """The active sort option did not switch to the requested label in time."""

    def __init__(self, label: str, actual: Optional[str], timeout_ms: float,
                 result: Optional[WaitResult] = None):
        self.label = label
        self.actual = actual
        super().__init__(
            f"Active sort option should be '{label}' but is '{actual}'", timeout_ms, result)


class SortOrderError(UiCheckError, AssertionError):
    """Product prices are not in the order implied by the sort label."""

    def __init__(self, message: str, label: str,
                 prices: Sequence[float], expected: Sequence[float]):
        self.label = label
        self.prices = list(prices)
        self.expected = list(expected)
        super().__init__(f"{message}: got {self.prices}, expected {self.expected}")
