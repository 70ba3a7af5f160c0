"""Number formatting helpers for KPI and project card display values."""

from typing import Union

Number = Union[int, float]


def _plain(num: Number) -> str:
    if isinstance(num, float) and num.is_integer():
        return str(int(num))
    return str(num)


def format_number(num: Number) -> str:
    """
    Abbreviate large numbers.

    1500000 -> "1.5M", 2500 -> "2.5K", 999 -> "999"
    """
    if num >= 1_000_000:
        return f"{num / 1_000_000:.1f}M"
    if num >= 1_000:
        return f"{num / 1_000:.1f}K"
    return _plain(num)


def format_currency(num: Number) -> str:
    return f"${format_number(num)}"


def format_percent(num: Number, decimals: int = 1, signed: bool = False) -> str:
    """Format a percentage, optionally with an explicit '+' for non-negative values"""
    text = f"{num:.{decimals}f}%"
    if signed and num >= 0:
        text = f"+{text}"
    return text
