"""Local calendar date from a UTC instant and a fixed offset."""
from datetime import date, datetime, timedelta, timezone
from typing import Optional


def local_today(now: Optional[datetime] = None, offset_hours: Optional[int] = None) -> date:
    """
    Return the household's calendar date.

    Args:
        now: Current instant. Naive values are taken as UTC. Defaults to the
            system clock; pass it explicitly in tests.
        offset_hours: Fixed UTC offset. Defaults to settings.TIMEZONE_OFFSET_HOURS.
    """
    if offset_hours is None:
        from app.config import settings
        offset_hours = settings.TIMEZONE_OFFSET_HOURS

    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    local = now.astimezone(timezone(timedelta(hours=offset_hours)))
    return local.date()
