"""February challenge window calculation."""

from datetime import date, datetime
from typing import Optional

from dateutil.relativedelta import relativedelta

from nospend.domain.entities import ChallengeWindow


def february_end(year: int) -> date:
    """Return the last day of February in the given year."""
    return date(year, 2, 1) + relativedelta(day=31)


def compute_window(now: Optional[date | datetime] = None) -> ChallengeWindow:
    """Compute where ``now`` falls relative to the next February challenge.

    The comparison is made at calendar-day granularity. A datetime is reduced
    to its calendar date in its own timezone; naive values are local time.

    Args:
        now: Reference date or datetime (defaults to today)

    Returns:
        ChallengeWindow for the current or upcoming February
    """
    if now is None:
        today = date.today()
    elif isinstance(now, datetime):
        today = now.date()
    else:
        today = now

    if today <= february_end(today.year):
        target_year = today.year
    else:
        target_year = today.year + 1

    start = date(target_year, 2, 1)
    end = february_end(target_year)

    is_active = start <= today <= end
    day_of_month = today.day if is_active else 0
    days_in_month = end.day
    days_left = days_in_month - day_of_month if is_active else days_in_month

    days_until_start = 0
    if not is_active and today < start:
        days_until_start = max(0, (start - today).days)

    return ChallengeWindow(
        is_active=is_active,
        day_of_month=day_of_month,
        days_in_month=days_in_month,
        days_left=days_left,
        days_until_start=days_until_start,
        year=target_year,
    )
