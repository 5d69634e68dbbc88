"""
Value parsing and ordering checks shared by the page objects.

Kept free of Playwright so the logic can be unit tested without a browser.
"""
import math
import re
from typing import Optional, Sequence, Tuple

SORT_TYPES = ("name", "price")
SORT_ORDERS = ("asc", "desc")

# Storefront sort dropdown values
SORT_OPTIONS = {
    ("name", "asc"): "az",
    ("name", "desc"): "za",
    ("price", "asc"): "lohi",
    ("price", "desc"): "hilo",
}

_NON_NUMERIC = re.compile(r"[^0-9.]")


def parse_price(text: str, currency: str = "$") -> float:
    """Parse a displayed price such as ``$29.99``."""
    value = (text or "").strip()
    if value.startswith(currency):
        value = value[len(currency) :]
    try:
        return float(value)
    except ValueError:
        raise ValueError(f"Cannot parse price from '{text}'")


def parse_amount(text: str) -> float:
    """Extract the amount from a summary label such as ``Item total: $39.98``."""
    digits = _NON_NUMERIC.sub("", text or "")
    try:
        return float(digits)
    except ValueError:
        raise ValueError(f"Cannot parse amount from '{text}'")


def parse_quantity(text: Optional[str]) -> int:
    """Parse a quantity cell. Empty or unparsable text counts as 0."""
    try:
        return int((text or "").strip())
    except ValueError:
        return 0


def sort_option_for(sort_type: str, order: str) -> str:
    _validate_sort(sort_type, order)
    return SORT_OPTIONS[(sort_type, order)]


def _validate_sort(sort_type: str, order: str) -> None:
    if sort_type not in SORT_TYPES:
        raise ValueError(f"Unknown sort type '{sort_type}', expected one of {SORT_TYPES}")
    if order not in SORT_ORDERS:
        raise ValueError(f"Unknown sort order '{order}', expected one of {SORT_ORDERS}")


def find_sort_inversion(
    items: Sequence[str], sort_type: str, order: str
) -> Optional[Tuple[int, str, str]]:
    """
    Walk adjacent pairs and return the first one out of order.

    Returns (index, current, next) for the first inversion, or None when the
    sequence is ordered. Names compare as strings; prices are parsed first.
    """
    _validate_sort(sort_type, order)

    for i in range(len(items) - 1):
        current, nxt = items[i], items[i + 1]
        if sort_type == "name":
            a, b = current, nxt
        else:
            a, b = parse_price(current), parse_price(nxt)

        in_order = a <= b if order == "asc" else a >= b
        if not in_order:
            return i, current, nxt
    return None


def assert_sorted(items: Sequence[str], sort_type: str, order: str) -> None:
    """Raise AssertionError on the first adjacent pair out of order."""
    inversion = find_sort_inversion(items, sort_type, order)
    if inversion is not None:
        _, current, nxt = inversion
        raise AssertionError(
            f"Products not sorted correctly by {sort_type} {order}. Found: {current} and {nxt}"
        )


def total_matches(subtotal: float, tax: float, total: float, places: int = 2) -> bool:
    """True when total equals subtotal + tax to the given decimal places."""
    return math.isclose(total, subtotal + tax, abs_tol=10 ** (-places) / 2)
