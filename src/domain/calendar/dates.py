"""Civil-date helpers shared by the calendar components."""

from datetime import date, datetime, time, timedelta, timezone, tzinfo

ISO_DATE_FORMAT = "%Y-%m-%d"


def monday_of(day: date) -> date:
    """Return the Monday of the ISO week containing ``day``."""
    return day - timedelta(days=day.weekday())


def date_range(start: date, count: int) -> list[date]:
    """Return ``count`` consecutive dates beginning at ``start``."""
    return [start + timedelta(days=offset) for offset in range(count)]


def days_before(day: date, count: int) -> list[date]:
    """Return the ``count`` dates immediately preceding ``day``, oldest first."""
    return date_range(day - timedelta(days=count), count)


def days_after(day: date, count: int) -> list[date]:
    """Return the ``count`` dates immediately following ``day``, oldest first."""
    return date_range(day + timedelta(days=1), count)


def local_date(moment: datetime, tz: tzinfo | None = None) -> date:
    """Return the civil date of ``moment`` as seen in ``tz``.

    Naive timestamps are stored as UTC, so with a ``tz`` they are converted from
    UTC. Without one they are taken as civil local times and used as-is.
    """
    if tz is None:
        return moment.date()
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(tz).date()


def date_key(day: date) -> str:
    """Format a date as the ``yyyy-MM-dd`` boundary key."""
    return day.strftime(ISO_DATE_FORMAT)


def parse_date_key(value: str) -> date:
    """Parse a ``yyyy-MM-dd`` key; raises ``ValueError`` on anything else."""
    return datetime.strptime(value, ISO_DATE_FORMAT).date()


def to_utc_naive(moment: datetime, tz: tzinfo | None = None) -> datetime:
    """Normalize a timestamp to the naive-UTC form used for storage.

    Aware values are converted; naive values are read as local times in ``tz``
    (or as UTC already when ``tz`` is None).
    """
    if moment.tzinfo is None:
        if tz is None:
            return moment
        moment = moment.replace(tzinfo=tz)
    return moment.astimezone(timezone.utc).replace(tzinfo=None)


def civil_noon(day: date, tz: tzinfo | None = None) -> datetime:
    """Storage timestamp for an entry filed under ``day``: 12:00 local time.

    Noon keeps the civil date stable whichever way the offset to UTC goes.
    """
    return to_utc_naive(datetime.combine(day, time(12, 0)), tz)


def day_bounds_utc(first: date, last: date, tz: tzinfo | None = None) -> tuple[datetime, datetime]:
    """Naive-UTC ``[start, end]`` covering the local days ``first`` through ``last``."""
    start = to_utc_naive(datetime.combine(first, time.min), tz)
    end = to_utc_naive(datetime.combine(last, time.max), tz)
    return start, end
