"""Duration and money formatting used by the export template.

These helpers back the ``duration`` and ``money`` template filters.
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Optional, Union

Number = Union[int, float, Decimal]


def seconds_to_decimal_hours(seconds: Optional[int]) -> Decimal:
    """Convert seconds to decimal hours with 2 decimal precision.

    Args:
        seconds: Duration in seconds (None counts as zero)

    Returns:
        Decimal hours rounded half up

    Example:
        >>> seconds_to_decimal_hours(27000)
        Decimal('7.50')
        >>> seconds_to_decimal_hours(600)
        Decimal('0.17')
    """
    hours = Decimal(seconds or 0) / Decimal("3600")
    return hours.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)


def format_duration(seconds: Optional[int], decimal: bool = False) -> str:
    """Format a duration for display.

    Args:
        seconds: Duration in seconds
        decimal: Show decimal hours instead of ``H:MM``

    Returns:
        ``"7.50"`` in decimal mode, ``"7:30"`` otherwise

    Example:
        >>> format_duration(27000)
        '7:30'
        >>> format_duration(-900)
        '-0:15'
    """
    if decimal:
        return str(seconds_to_decimal_hours(seconds))

    seconds = seconds or 0
    sign = "-" if seconds < 0 else ""
    hours, remainder = divmod(abs(seconds), 3600)
    return f"{sign}{hours}:{remainder // 60:02d}"


def format_money(amount: Optional[Number], currency: str = "EUR") -> str:
    """Format an amount with two decimals and its currency code.

    Example:
        >>> format_money(Decimal("1234.5"), "EUR")
        '1,234.50 EUR'
    """
    value = Decimal(str(amount or 0)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    return f"{value:,} {currency}"
