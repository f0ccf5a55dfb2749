"""Formatting utilities for currency and date display."""

from __future__ import annotations

import math
from datetime import date
from typing import Union


def escape_dollar_for_markdown(text: str) -> str:
    """Escape dollar signs so Streamlit markdown does not treat them as LaTeX."""
    return text.replace("$", "\\$")


def format_currency(amount: Union[float, int], include_sign: bool = True) -> str:
    """Format a currency amount with two decimals.

    Example:
        >>> format_currency(1234.5)
        '$1,234.50'
        >>> format_currency(1234.5, include_sign=False)
        '1,234.50'
    """
    formatted = f"{amount:,.2f}"
    return f"${formatted}" if include_sign else formatted


def format_signed_amount(amount: float, kind: str) -> str:
    """``+$12.00`` for income, ``-$12.00`` for expenses."""
    sign = "+" if kind == "income" else "-"
    return f"{sign}{format_currency(abs(amount))}"


def format_balance(balance: float) -> str:
    """Absolute balance followed by ``surplus`` or ``deficit``."""
    label = "surplus" if balance >= 0 else "deficit"
    return f"{format_currency(abs(balance))} {label}"


def format_date(value: date) -> str:
    return value.strftime("%b %d, %Y")


def format_time_until(days: int) -> str:
    """Human label for a number of days until a target date.

    Example:
        >>> format_time_until(0)
        'Today'
        >>> format_time_until(10)
        '2 weeks'
    """
    if days <= 0:
        return "Today"
    if days == 1:
        return "Tomorrow"
    if days < 7:
        return f"{days} days"
    if days < 30:
        return f"{math.ceil(days / 7)} weeks"
    if days < 365:
        return f"{math.ceil(days / 30)} months"
    return f"{math.ceil(days / 365)} years"
