"""
Time helpers. All stored timestamps are naive UTC.
"""
from datetime import datetime, timezone

from dateutil.relativedelta import relativedelta


def utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


def time_ago(moment: datetime, now: datetime | None = None) -> str:
    """Human readable distance, e.g. '2 hours ago'"""
    now = now or utcnow()
    if moment >= now:
        return "just now"

    delta = relativedelta(now, moment)
    for unit in ("years", "months", "days", "hours", "minutes"):
        value = getattr(delta, unit)
        if value:
            label = unit if value > 1 else unit[:-1]
            return f"{value} {label} ago"
    return "just now"


def as_naive_utc(moment: datetime) -> datetime:
    """Client supplied datetimes may carry an offset; storage does not"""
    if moment.tzinfo is None:
        return moment
    return moment.astimezone(timezone.utc).replace(tzinfo=None)
