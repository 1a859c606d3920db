"""
Date and instant conversions.

Every helper takes the zone explicitly. Instants are epoch milliseconds.
"""
import calendar
import re
from datetime import date, datetime, time, timedelta, timezone, tzinfo
from typing import Optional, Tuple
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dateutil.tz import tzlocal

MINUTES_PER_DAY = 24 * 60
MILLIS_PER_MINUTE = 60 * 1000

_OFFSET_RE = re.compile(r"^([+-])(\d{2}):?(\d{2})$")


def resolve_zone(name: Optional[str]) -> tzinfo:
    """
    Resolve a timezone identifier into a tzinfo.

    Accepted forms:
      - None, "" or "local": the machine's local zone, DST rules included
      - "UTC", "Z", "GMT"
      - fixed offsets such as "+02:00" or "-0530"
      - IANA names such as "Europe/Berlin"

    Raises ValueError for anything else.
    """
    raw = (name or "").strip()
    low = raw.lower()

    if low in {"", "local", "system"}:
        return tzlocal()
    if low in {"utc", "z", "gmt"}:
        return timezone.utc

    match = _OFFSET_RE.match(raw)
    if match:
        sign, hours, minutes = match.groups()
        if int(hours) > 23 or int(minutes) > 59:
            raise ValueError(f"Invalid timezone offset: {raw!r}")
        offset = timedelta(hours=int(hours), minutes=int(minutes))
        return timezone(offset if sign == "+" else -offset)

    try:
        return ZoneInfo(raw)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise ValueError(f"Invalid timezone identifier: {raw!r}") from exc


def to_local_datetime(millis: int, zone: tzinfo) -> datetime:
    return datetime.fromtimestamp(millis / 1000, tz=timezone.utc).astimezone(zone)


def to_local_date(millis: int, zone: tzinfo) -> date:
    return to_local_datetime(millis, zone).date()


_EPOCH = datetime(1970, 1, 1)


def _to_millis(moment: datetime) -> int:
    # Naive arithmetic stays valid at the ends of the date range, where
    # astimezone() overflows. Integer math keeps milliseconds exact.
    delta = moment.replace(tzinfo=None) - _EPOCH - (moment.utcoffset() or timedelta(0))
    return (delta.days * 86_400 + delta.seconds) * 1000 + delta.microseconds // 1000


def at_time_millis(day: date, at: time, zone: tzinfo) -> int:
    return _to_millis(datetime.combine(day, at, tzinfo=zone))


def start_of_day_millis(day: date, zone: tzinfo) -> int:
    return at_time_millis(day, time.min, zone)


def next_day_start_millis(day: date, zone: tzinfo) -> int:
    """Local midnight that ends ``day``, also for ``date.max``."""
    if day == date.max:
        return at_time_millis(day, time.max, zone) + 1
    return start_of_day_millis(day + timedelta(days=1), zone)


def end_of_day_millis(day: date, zone: tzinfo) -> int:
    """Last millisecond of the local day."""
    return next_day_start_millis(day, zone) - 1


def all_day_span(first: date, last: Optional[date], zone: tzinfo) -> Tuple[int, int]:
    """Start/end pair for an all-day event covering ``first`` through ``last``."""
    if last is None or last < first:
        last = first
    return start_of_day_millis(first, zone), end_of_day_millis(last, zone)


def minutes_since_midnight(instant_millis: int, day_start_millis: int) -> int:
    """Whole minutes between local midnight and an instant, clamped to one day."""
    minutes = (instant_millis - day_start_millis) // MILLIS_PER_MINUTE
    return max(0, min(MINUTES_PER_DAY, minutes))


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def shift_month(year: int, month: int, delta: int) -> Tuple[int, int]:
    """Move ``delta`` months forward (or backward when negative)."""
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1
