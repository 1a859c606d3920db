from datetime import date, timezone

from homecal.core.formatting import (
    BLACK,
    WHITE,
    contrasting_text_color,
    describe_time_range,
    effective_color,
    fallback_link_title,
    first_url,
    normalize_argb,
)
from homecal.core.models import Event, RepeatFrequency

from helpers import MARCH_10, all_day, timed

DEFAULT = 0xFF6750A4


def test_effective_color_falls_back_for_zero_or_missing():
    assert effective_color(Event(color_argb=None), DEFAULT) == DEFAULT
    assert effective_color(Event(color_argb=0), DEFAULT) == DEFAULT
    assert effective_color(Event(color_argb=0xFF00897B), DEFAULT) == 0xFF00897B


def test_normalize_argb_masks_signed_values():
    assert normalize_argb(-1) == 0xFFFFFFFF
    assert normalize_argb(-16_742_021) == 0xFF00897B


def test_contrasting_text_color():
    assert contrasting_text_color(0xFFFFFFFF) == BLACK
    assert contrasting_text_color(0xFFFFEB3B) == BLACK
    assert contrasting_text_color(0xFF000000) == WHITE
    assert contrasting_text_color(0xFF6D4C41) == WHITE


def test_describe_time_range():
    assert describe_time_range(all_day("a", MARCH_10, timezone.utc), timezone.utc) == "Mar 10, 2024 · All day"
    assert (
        describe_time_range(timed("b", MARCH_10, "09:00", "10:00", timezone.utc), timezone.utc)
        == "Mar 10, 2024 · 09:00 – 10:00"
    )

    start = timed("c", MARCH_10, "23:00", "23:30", timezone.utc).start_epoch_millis
    end = timed("c", date(2024, 3, 11), "01:00", "02:00", timezone.utc).start_epoch_millis
    overnight = Event(start_epoch_millis=start, end_epoch_millis=end)
    assert describe_time_range(overnight, timezone.utc) == "Mar 10, 2024 23:00 → Mar 11, 2024 01:00"


def test_repeat_labels():
    assert RepeatFrequency.NONE.display_name == "Does not repeat"
    assert RepeatFrequency.WEEKLY.display_name == "Weekly"


def test_first_url():
    assert first_url("look at https://example.com/a?b=1 later") == "https://example.com/a?b=1"
    assert first_url("http://x.io") == "http://x.io"
    assert first_url("no links here") is None
    assert first_url(None) is None


def test_fallback_link_title_truncates_long_urls():
    short = "https://example.com/" + "a" * 40
    long = "https://example.com/" + "a" * 60

    assert fallback_link_title(short) == short
    assert fallback_link_title(long) == long[:57] + "..."
    assert len(fallback_link_title(long)) == 60


def test_multi_day_all_day_range_names_both_days():
    trip = all_day("trip", MARCH_10, timezone.utc, last=date(2024, 3, 12))

    assert describe_time_range(trip, timezone.utc) == "Mar 10, 2024 – Mar 12, 2024 · All day"
