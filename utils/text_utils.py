import re
from typing import Sequence

CURRENCY_SYMBOLS = "$€£"

_PRICE_PATTERN = re.compile(r"^[" + re.escape(CURRENCY_SYMBOLS) + r"]?\s*(-?\d[\d,]*(?:\.\d+)?)$")


def parse_price(text: str) -> float:
    """
    Convert a currency-prefixed price string into a number.

    Args:
        text (str): Price as rendered on the page, e.g. "$29.99" or " $1,049.00 ".

    Returns:
        float: Numeric price.

    Raises:
        ValueError: If the text is not a price.
    """
    if text is None:
        raise ValueError("Price text is None")

    match = _PRICE_PATTERN.match(text.strip())
    if not match:
        raise ValueError(f"Not a price: {text!r}")
    return float(match.group(1).replace(",", ""))


def is_monotonic(values: Sequence[float], descending: bool = False) -> bool:
    """
    Check that values never go down (ascending) or never go up (descending).
    Equal neighbours are allowed in both directions.
    """
    if descending:
        return all(a >= b for a, b in zip(values, values[1:]))
    return all(a <= b for a, b in zip(values, values[1:]))


def normalize_whitespace(text: str) -> str:
    """Collapse runs of whitespace into single spaces and trim the ends."""
    return " ".join((text or "").split())
