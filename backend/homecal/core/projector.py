"""
Projection of events onto the minutes of a single local day.
"""
from dataclasses import dataclass
from datetime import date, tzinfo
from typing import Iterable, List, Optional, Tuple

from homecal.core.dates import (
    MINUTES_PER_DAY,
    minutes_since_midnight,
    next_day_start_millis,
    start_of_day_millis,
)
from homecal.core.models import Event

HOURS_PER_DAY = 24


@dataclass(frozen=True)
class DaySpan:
    start_minute: int
    end_minute: int

    def overlaps(self, start_minute: int, end_minute: int) -> bool:
        return self.start_minute < end_minute and self.end_minute > start_minute


@dataclass(frozen=True)
class HourRow:
    hour: int
    primary: Optional[Event] = None
    primary_span: Optional[DaySpan] = None
    additional_count: int = 0
    is_start_hour: bool = False


def project_onto_day(event: Event, day: date, zone: tzinfo) -> Optional[DaySpan]:
    """
    Minutes of ``day`` covered by ``event``.

    Returns None when the event does not touch the day, or when clipping leaves
    nothing (including inverted start/end pairs). All-day events cover the
    whole day on every day their span touches.
    """
    day_start = start_of_day_millis(day, zone)
    day_end = next_day_start_millis(day, zone)

    if event.end_epoch_millis <= day_start or event.start_epoch_millis >= day_end:
        return None
    if event.all_day:
        return DaySpan(0, MINUTES_PER_DAY)

    clamped_start = max(event.start_epoch_millis, day_start)
    clamped_end = min(event.end_epoch_millis, day_end)
    start_minute = minutes_since_midnight(clamped_start, day_start)
    end_minute = minutes_since_midnight(clamped_end, day_start)

    if end_minute <= start_minute:
        return None
    return DaySpan(start_minute, end_minute)


def project_day(events: Iterable[Event], day: date, zone: tzinfo) -> List[Tuple[Event, DaySpan]]:
    """Every event that intersects ``day``, paired with its span, in input order."""
    projected = []
    for event in events:
        span = project_onto_day(event, day, zone)
        if span is not None:
            projected.append((event, span))
    return projected


def build_hour_rows(events: Iterable[Event], day: date, zone: tzinfo) -> List[HourRow]:
    """
    Lay a day's events out as 24 hour rows.

    Each row shows the covering event with the earliest clamped start and
    counts the rest.
    """
    spans = project_day(events, day, zone)
    rows = []
    for hour in range(HOURS_PER_DAY):
        row_start = hour * 60
        row_end = row_start + 60
        covering = [(event, span) for event, span in spans if span.overlaps(row_start, row_end)]
        if not covering:
            rows.append(HourRow(hour=hour))
            continue

        # min() returns the first of equal keys, keeping input order on ties.
        event, span = min(covering, key=lambda pair: pair[1].start_minute)
        rows.append(
            HourRow(
                hour=hour,
                primary=event,
                primary_span=span,
                additional_count=len(covering) - 1,
                is_start_hour=row_start <= span.start_minute < row_end,
            )
        )
    return rows
