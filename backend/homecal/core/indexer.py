"""
Grouping of events by local calendar date.

Indexes are rebuilt from scratch on every call; nothing is cached between
snapshots.
"""
from datetime import date, tzinfo
from typing import Dict, Iterable, List, Set, Tuple

from homecal.core.dates import to_local_date
from homecal.core.models import Event

EventIndex = Dict[date, List[Event]]


def _by_start(event: Event) -> int:
    return event.start_epoch_millis


def index_by_date(events: Iterable[Event], zone: tzinfo) -> EventIndex:
    """
    Bucket events by the local date of their start instant.

    Buckets are ordered by start instant. ``sorted`` is stable, so events with
    equal starts keep their input order.
    """
    buckets: EventIndex = {}
    for event in events:
        buckets.setdefault(to_local_date(event.start_epoch_millis, zone), []).append(event)
    return {day: sorted(bucket, key=_by_start) for day, bucket in buckets.items()}


def day_view(index: EventIndex, day: date) -> List[Event]:
    return list(index.get(day, []))


def month_view(index: EventIndex, year: int, month: int) -> List[Tuple[date, List[Event]]]:
    """All (date, events) pairs inside the month, by date."""
    return [
        (day, list(bucket))
        for day, bucket in sorted(index.items())
        if day.year == year and day.month == month
    ]


def dates_with_events(index: EventIndex, year: int, month: int) -> Set[date]:
    return {day for day, bucket in index.items() if bucket and day.year == year and day.month == month}


def upcoming(events: Iterable[Event], now_millis: int) -> List[Event]:
    """
    Events that have not finished by ``now_millis``, by start instant.

    Duplicate deliveries of the same id keep only the first copy. Events that
    were never persisted (blank id) are not merged with each other.
    """
    seen: Set[str] = set()
    result: List[Event] = []
    for event in events:
        if event.id:
            if event.id in seen:
                continue
            seen.add(event.id)
        if event.end_epoch_millis >= now_millis:
            result.append(event)
    return sorted(result, key=_by_start)
