"""Shared utilities used across the booking intake package."""

from datetime import date
from typing import Optional


def is_blank(value: Optional[str]) -> bool:
    """True for None, empty and whitespace-only strings.

    Examples:
        >>> is_blank("  ")
        True
        >>> is_blank(" Anna ")
        False
    """
    return value is None or not value.strip()


def format_clock(hour: int, minute: int) -> str:
    """Render a 24-hour wall-clock time as zero-padded ``HH:MM``.

    Examples:
        >>> format_clock(9, 5)
        '09:05'
    """
    return f"{hour:02d}:{minute:02d}"


def format_price(amount: int, currency: str = "₹") -> str:
    """Render an integer price with thousands separators.

    Examples:
        >>> format_price(50000)
        '₹50,000'
    """
    return f"{currency}{amount:,}"


def describe_date(value: date) -> str:
    """Long, human-readable form of a calendar date.

    Examples:
        >>> describe_date(date(2025, 7, 10))
        'Thursday, 10 July 2025'
    """
    return f"{value.strftime('%A')}, {value.day} {value.strftime('%B %Y')}"
