"""Duration and amount calculations, plus display formatting."""
from timemoney.models.currency import get_currency

MS_PER_MINUTE = 60_000


def calculate_amount(duration_minutes: float, hourly_rate: float) -> float:
    """
    Convert a duration into a monetary amount.

    Args:
        duration_minutes: Duration in (fractional) minutes
        hourly_rate: Rate per hour

    Returns:
        (duration_minutes / 60) * hourly_rate

    Examples:
        >>> calculate_amount(90, 15)
        22.5
    """
    return (duration_minutes / 60) * hourly_rate


def get_duration_minutes(start_time: int, end_time: int) -> float:
    """
    Get fractional minutes between two epoch-millisecond timestamps.

    Examples:
        >>> get_duration_minutes(0, 90_000)
        1.5
    """
    return (end_time - start_time) / MS_PER_MINUTE


def format_duration(minutes: float) -> str:
    """
    Format minutes as a short human readable duration.

    Examples:
        >>> format_duration(45)
        '45m'
        >>> format_duration(120)
        '2h'
        >>> format_duration(90)
        '1h 30m'
    """
    hours = int(minutes // 60)
    mins = round(minutes % 60)

    if hours == 0:
        return f"{mins}m"
    if mins == 0:
        return f"{hours}h"
    return f"{hours}h {mins}m"


def format_elapsed_time(ms: int) -> str:
    """
    Format elapsed milliseconds as a running clock.

    Examples:
        >>> format_elapsed_time(65_000)
        '01:05'
        >>> format_elapsed_time(3_725_000)
        '01:02:05'
    """
    total_seconds = int(ms // 1000)
    hours = total_seconds // 3600
    minutes = (total_seconds % 3600) // 60
    seconds = total_seconds % 60

    if hours > 0:
        return f"{hours:02d}:{minutes:02d}:{seconds:02d}"
    return f"{minutes:02d}:{seconds:02d}"


def format_amount(amount: float, currency_code: str) -> str:
    """
    Format an amount with its currency symbol.

    Codes outside the catalog are shown as-is in place of a symbol.

    Examples:
        >>> format_amount(12.5, "USD")
        '$12.50'
        >>> format_amount(3, "GBP")
        'GBP3.00'
    """
    currency = get_currency(currency_code)
    symbol = currency.symbol if currency else currency_code
    return f"{symbol}{amount:.2f}"
