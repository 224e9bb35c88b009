"""Utility functions."""
import math


def clamp(value: int, low: int, high: int) -> int:
    """Clamp ``value`` into ``[low, high]``."""
    return max(low, min(value, high))


def strip_or_none(value: str | None) -> str | None:
    """Trim whitespace; blank strings become None."""
    if value is None:
        return None
    value = value.strip()
    return value or None


def parse_int(value: str | None) -> int | None:
    """Lenient integer parse for query strings. Anything unparsable is None."""
    if value is None:
        return None
    try:
        return int(value.strip())
    except ValueError:
        return None


def parse_price(value) -> float | None:
    """Parse a price from a form or JSON value. Blank means no price."""
    if value is None:
        return None
    if isinstance(value, bool):
        raise ValueError("price must be a number")
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        price = float(value)
    except (TypeError, ValueError):
        raise ValueError("price must be a number")
    if not math.isfinite(price):
        raise ValueError("price must be a number")
    return price
