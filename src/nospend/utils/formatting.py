"""Danish display formatting for amounts and dates."""

from datetime import date, datetime
from decimal import Decimal, ROUND_HALF_UP

DANISH_MONTHS_SHORT = [
    "jan.",
    "feb.",
    "mar.",
    "apr.",
    "maj",
    "jun.",
    "jul.",
    "aug.",
    "sep.",
    "okt.",
    "nov.",
    "dec.",
]


def format_currency(value: Decimal | int) -> str:
    """Format an amount as Danish kroner without decimals (e.g. '4.500 kr.')."""
    whole = Decimal(value).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    sign = "-" if whole < 0 else ""
    digits = f"{abs(int(whole)):,}".replace(",", ".")
    return f"{sign}{digits} kr."


def format_date(value: date | datetime | str) -> str:
    """Format a date as day and short Danish month (e.g. '05. feb.').

    Timezone-aware datetimes are converted to local time first.
    """
    if isinstance(value, str):
        value = datetime.fromisoformat(value)
    if isinstance(value, datetime) and value.tzinfo is not None:
        value = value.astimezone()
    return f"{value.day:02d}. {DANISH_MONTHS_SHORT[value.month - 1]}"


def format_percent(ratio: Decimal) -> str:
    """Format a 0-1 ratio as a whole percentage."""
    percent = (ratio * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    return f"{percent}%"
