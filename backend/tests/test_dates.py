import os
import time as systime
from datetime import date, time, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from homecal.core.dates import (
    all_day_span,
    at_time_millis,
    end_of_day_millis,
    minutes_since_midnight,
    next_day_start_millis,
    resolve_zone,
    start_of_day_millis,
    to_local_date,
    to_local_datetime,
)

BERLIN = ZoneInfo("Europe/Berlin")


def test_resolve_zone_names_and_offsets():
    assert resolve_zone("UTC") is timezone.utc
    assert resolve_zone("z") is timezone.utc
    assert resolve_zone("Europe/Berlin") == BERLIN
    assert resolve_zone("+02:00").utcoffset(None) == timedelta(hours=2)
    assert resolve_zone("-0530").utcoffset(None) == timedelta(hours=-5, minutes=-30)
    assert resolve_zone(None) is not None


@pytest.mark.parametrize("bad", ["Mars/Olympus", "+25:00", "not a zone"])
def test_resolve_zone_rejects_unknown(bad):
    with pytest.raises(ValueError):
        resolve_zone(bad)


def test_start_of_day_in_utc():
    assert start_of_day_millis(date(1970, 1, 2), timezone.utc) == 86_400_000


def test_end_of_day_is_one_millisecond_before_next_midnight():
    day = date(2024, 3, 10)
    assert end_of_day_millis(day, BERLIN) == start_of_day_millis(date(2024, 3, 11), BERLIN) - 1


def test_dst_day_is_23_hours_long():
    # Clocks in Berlin jump forward on 2024-03-31
    day = date(2024, 3, 31)
    length = start_of_day_millis(day + timedelta(days=1), BERLIN) - start_of_day_millis(day, BERLIN)
    assert length == 23 * 3600 * 1000


def test_local_date_depends_on_zone():
    late_evening_utc = at_time_millis(date(2024, 3, 10), time(23, 30), timezone.utc)

    assert to_local_date(late_evening_utc, timezone.utc) == date(2024, 3, 10)
    assert to_local_date(late_evening_utc, BERLIN) == date(2024, 3, 11)
    assert to_local_datetime(late_evening_utc, BERLIN).hour == 0


def test_all_day_span_single_and_multi_day():
    start, end = all_day_span(date(2024, 3, 10), None, BERLIN)
    assert start == start_of_day_millis(date(2024, 3, 10), BERLIN)
    assert end == end_of_day_millis(date(2024, 3, 10), BERLIN)

    _, multi_end = all_day_span(date(2024, 3, 10), date(2024, 3, 12), BERLIN)
    assert multi_end == end_of_day_millis(date(2024, 3, 12), BERLIN)


def test_all_day_span_ignores_last_day_before_first():
    assert all_day_span(date(2024, 3, 10), date(2024, 3, 1), BERLIN) == all_day_span(
        date(2024, 3, 10), None, BERLIN
    )


def test_minutes_since_midnight_truncates_and_clamps():
    midnight = start_of_day_millis(date(2024, 3, 10), timezone.utc)

    assert minutes_since_midnight(midnight + 90 * 60_000 + 59_999, midnight) == 90
    assert minutes_since_midnight(midnight - 1, midnight) == 0
    assert minutes_since_midnight(midnight + 2 * 86_400_000, midnight) == 1440


@pytest.fixture
def berlin_system_zone():
    if not hasattr(systime, "tzset"):
        pytest.skip("process timezone can't be switched on this platform")
    previous = os.environ.get("TZ")
    os.environ["TZ"] = "Europe/Berlin"
    systime.tzset()
    yield
    if previous is None:
        os.environ.pop("TZ", None)
    else:
        os.environ["TZ"] = previous
    systime.tzset()


def test_local_zone_follows_daylight_saving(berlin_system_zone):
    local = resolve_zone("local")

    for day in (date(2024, 1, 15), date(2024, 7, 15), date(2024, 10, 27)):
        assert start_of_day_millis(day, local) == start_of_day_millis(day, BERLIN)
    assert start_of_day_millis(date(2024, 1, 15), local) == 1_705_273_200_000


def test_last_representable_day_has_an_end():
    expected = (date.max.toordinal() - date(1970, 1, 1).toordinal() + 1) * 86_400_000

    assert next_day_start_millis(date.max, timezone.utc) == expected
    assert end_of_day_millis(date.max, timezone.utc) == expected - 1
    assert all_day_span(date.max, None, BERLIN)[1] > start_of_day_millis(date.max, BERLIN)


def test_first_representable_day_converts():
    expected = (date.min.toordinal() - date(1970, 1, 1).toordinal()) * 86_400_000

    assert start_of_day_millis(date.min, timezone.utc) == expected
    assert start_of_day_millis(date.min, resolve_zone("+05:00")) == expected - 5 * 3_600_000
