from datetime import date, time

from homecal.core.dates import all_day_span, at_time_millis
from homecal.core.models import Event


def timed(event_id, day, start, end, zone, **fields):
    """Event on ``day`` from ``start`` to ``end`` given as "HH:MM" strings."""
    return Event(
        id=event_id,
        title=fields.pop("title", event_id),
        start_epoch_millis=at_time_millis(day, time.fromisoformat(start), zone),
        end_epoch_millis=at_time_millis(day, time.fromisoformat(end), zone),
        **fields,
    )


def all_day(event_id, first, zone, last=None, **fields):
    start, end = all_day_span(first, last, zone)
    return Event(
        id=event_id,
        title=fields.pop("title", event_id),
        start_epoch_millis=start,
        end_epoch_millis=end,
        all_day=True,
        **fields,
    )


MARCH_10 = date(2024, 3, 10)
