"""Utility functions for parsing and formatting numbers."""

from decimal import Decimal, ROUND_HALF_UP
from typing import Optional


def parse_count(value: str) -> Optional[int]:
    """
    Parse a non-negative whole seat count from a raw field.

    Args:
        value: Raw string field

    Returns:
        Parsed count, or None if the field is blank, negative or not a whole number
    """
    text = str(value).strip()
    try:
        count = int(text)
    except ValueError:
        # Accept "12.0" but not "12.5"
        try:
            number = float(text)
        except ValueError:
            return None
        if number != number or not number.is_integer():
            return None
        count = int(number)
    if count < 0:
        return None
    return count


def parse_amount(value: str, currency_symbol: str = "£") -> Optional[float]:
    """
    Parse a non-negative monetary amount or distance from a raw field.

    A leading currency symbol (e.g. "£12.50") is ignored.

    Args:
        value: Raw string field
        currency_symbol: Symbol to strip before parsing

    Returns:
        Parsed amount, or None if the field is blank, negative or not numeric
    """
    text = str(value).strip()
    if currency_symbol:
        text = text.replace(currency_symbol, "").strip()
    try:
        amount = float(text)
    except ValueError:
        return None
    # Reject nan and inf
    if amount != amount or amount in (float("inf"), float("-inf")):
        return None
    if amount < 0:
        return None
    return amount


def format_number(value: float) -> str:
    """
    Format a distance the way it reads in the source data.

    Examples:
        >>> format_number(600.0)
        '600'
        >>> format_number(612.5)
        '612.5'
    """
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def format_money(amount: float, currency_symbol: str = "£") -> str:
    """
    Format a profit/loss with two decimal places and a currency symbol.

    Examples:
        >>> format_money(3000.0)
        '£3000.00'
        >>> format_money(-12.5)
        '£-12.50'
    """
    return f"{currency_symbol}{amount:.2f}"


def round_money(amount: float) -> float:
    """
    Round a monetary amount to 2 decimal places, halves away from zero.

    Examples:
        >>> round_money(0.125)
        0.13
        >>> round_money(-0.125)
        -0.13
    """
    return float(Decimal(amount).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))
