"""Formatting helpers for cost and analysis output.

Numbers follow Turkish conventions: '.' groups thousands, ',' separates
decimals, and the currency label follows the amount
(e.g., '7.498.575 TL' or '5.175,5 TL').
"""

from __future__ import annotations

_MAX_FRACTION_DIGITS = 3


def format_number(value: float, max_decimals: int = _MAX_FRACTION_DIGITS) -> str:
    """Format a number with Turkish grouping, dropping trailing zeros."""
    text = f"{value:,.{max_decimals}f}"
    integer, _, fraction = text.partition(".")
    fraction = fraction.rstrip("0")
    integer = integer.replace(",", ".")
    if integer == "-0" and not fraction:
        integer = "0"
    return f"{integer},{fraction}" if fraction else integer


def format_currency(amount: float, currency: str = "TL") -> str:
    """Format a currency amount, e.g. ``format_currency(1234.5) == '1.234,5 TL'``."""
    return f"{format_number(amount)} {currency}"


def format_area(area_m2: float) -> str:
    """Format a floor area as 'X.XXX m²'."""
    return f"{format_number(area_m2, 0)} m²"


def format_percent(value: float) -> str:
    """Format a percentage with one decimal and an explicit '+' when positive."""
    sign = "+" if value > 0 else ""
    return f"{sign}{value:.1f}%"


def format_payback(years: float | None) -> str:
    """Format a payback period; ``None`` means the cost is never recovered."""
    if years is None:
        return "Not recoverable"
    return f"{years:.1f} years"
