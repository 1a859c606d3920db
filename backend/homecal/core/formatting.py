"""
Display helpers: colors, time range labels and link titles.
"""
import re
from datetime import tzinfo
from typing import Optional

from homecal.core.dates import to_local_datetime
from homecal.core.models import Event

BLACK = 0xFF000000
WHITE = 0xFFFFFFFF

_URL_RE = re.compile(r"(https?://\S+)")


def normalize_argb(value: int) -> int:
    """Pack a (possibly signed) color int into an unsigned 32-bit ARGB value."""
    return value & 0xFFFFFFFF


def effective_color(event: Event, default_argb: int) -> int:
    if not event.color_argb:
        return normalize_argb(default_argb)
    return normalize_argb(event.color_argb)


def _linear(channel: int) -> float:
    c = channel / 255
    return c / 12.92 if c <= 0.04045 else ((c + 0.055) / 1.055) ** 2.4


def luminance(argb: int) -> float:
    """WCAG relative luminance of an ARGB color, ignoring alpha."""
    r = (argb >> 16) & 0xFF
    g = (argb >> 8) & 0xFF
    b = argb & 0xFF
    return 0.2126 * _linear(r) + 0.7152 * _linear(g) + 0.0722 * _linear(b)


def contrasting_text_color(argb: int) -> int:
    return BLACK if luminance(argb) > 0.5 else WHITE


def describe_time_range(event: Event, zone: tzinfo) -> str:
    """
    Human readable span of an event.

    "Mar 10, 2024 · All day", "Mar 10, 2024 – Mar 12, 2024 · All day",
    "Mar 10, 2024 · 09:00 – 10:00", or
    "Mar 10, 2024 23:00 → Mar 11, 2024 01:00" when the event crosses midnight.
    """
    start = to_local_datetime(event.start_epoch_millis, zone)
    end = to_local_datetime(event.end_epoch_millis, zone)
    start_day = f"{start:%b} {start.day}, {start.year}"
    end_day = f"{end:%b} {end.day}, {end.year}"

    if event.all_day:
        if start.date() >= end.date():
            return f"{start_day} · All day"
        return f"{start_day} – {end_day} · All day"
    if start.date() == end.date():
        return f"{start_day} · {start:%H:%M} – {end:%H:%M}"
    return f"{start_day} {start:%H:%M} → {end_day} {end:%H:%M}"


def first_url(text: Optional[str]) -> Optional[str]:
    match = _URL_RE.search(text or "")
    return match.group(1) if match else None


def fallback_link_title(url: str) -> str:
    if len(url) > 60:
        return url[:57] + "..."
    return url
