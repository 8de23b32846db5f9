"""Date window derivation.

Each refresh derives three windows from one instant:
  TODAY          start of the calendar day        -> now
  WEEK           start of the calendar week       -> now
  MONTH_TO_DATE  first day of the calendar month  -> now

Calendar boundaries are taken in the given timezone, so "today" means the
merchant's day rather than the UTC day. Nothing here is cached.
"""

from datetime import datetime, time, timedelta, tzinfo

from src.rv_common.enums import RevenueWindow
from src.rv_revenue.domain.models import DateWindow


def start_of_day(now: datetime, tz: tzinfo) -> datetime:
    local = now.astimezone(tz)
    return datetime.combine(local.date(), time.min, tzinfo=tz)


def start_of_week(now: datetime, tz: tzinfo, week_start: int = 0) -> datetime:
    """week_start follows datetime.weekday(): 0=Monday ... 6=Sunday."""
    if not (0 <= week_start <= 6):
        raise ValueError(f"week_start must be between 0 and 6, got {week_start}")
    day = start_of_day(now, tz)
    offset = (day.weekday() - week_start) % 7
    return datetime.combine(day.date() - timedelta(days=offset), time.min, tzinfo=tz)


def start_of_month(now: datetime, tz: tzinfo) -> datetime:
    local = now.astimezone(tz)
    return datetime.combine(local.date().replace(day=1), time.min, tzinfo=tz)


def compute_windows(
    now: datetime, tz: tzinfo, week_start: int = 0
) -> dict[RevenueWindow, DateWindow]:
    if now.tzinfo is None:
        raise ValueError("now must be timezone-aware")
    return {
        RevenueWindow.TODAY: DateWindow(start_of_day(now, tz), now),
        RevenueWindow.WEEK: DateWindow(start_of_week(now, tz, week_start), now),
        RevenueWindow.MONTH_TO_DATE: DateWindow(start_of_month(now, tz), now),
    }
