from datetime import date, timedelta

import pytest

from homecal.core.dates import days_in_month, shift_month
from homecal.core.grid import DateCell, EmptyCell, build_month_cells, month_rows, weekday_header
from homecal.core.models import Weekday


def test_march_2024_starting_monday_has_four_leading_blanks():
    cells = build_month_cells(2024, 3, Weekday.MONDAY)

    assert cells[:4] == [EmptyCell()] * 4
    assert cells[4] == DateCell(date(2024, 3, 1))
    assert cells[4 + 30] == DateCell(date(2024, 3, 31))
    assert len(cells) == 35
    assert cells[35 - 1] == DateCell(date(2024, 3, 31))


def test_march_2024_starting_sunday():
    cells = build_month_cells(2024, 3, Weekday.SUNDAY)

    assert cells[:5] == [EmptyCell()] * 5
    assert cells[5] == DateCell(date(2024, 3, 1))
    assert len(cells) == 42


def test_february_that_fits_exactly_four_rows():
    # Feb 2015 starts on a Sunday and has 28 days
    cells = build_month_cells(2015, 2, Weekday.SUNDAY)

    assert len(cells) == 28
    assert all(isinstance(cell, DateCell) for cell in cells)


@pytest.mark.parametrize("year", [1900, 2000, 2023, 2024, 2100])
@pytest.mark.parametrize("first_day", list(Weekday))
def test_every_month_is_whole_rows_with_each_day_once(year, first_day):
    for month in range(1, 13):
        cells = build_month_cells(year, month, first_day)
        dates = [cell.date for cell in cells if isinstance(cell, DateCell)]
        expected = [date(year, month, 1) + timedelta(days=i) for i in range(days_in_month(year, month))]

        assert len(cells) % 7 == 0
        assert 28 <= len(cells) <= 42
        assert dates == expected


@pytest.mark.parametrize("first_day", list(Weekday))
def test_first_date_lands_in_its_weekday_column(first_day):
    cells = build_month_cells(2024, 9, first_day)
    column = next(i for i, cell in enumerate(cells) if isinstance(cell, DateCell))

    assert weekday_header(first_day)[column] == Weekday(date(2024, 9, 1).isoweekday())


def test_padding_only_at_the_edges():
    cells = build_month_cells(2024, 6, Weekday.MONDAY)
    kinds = "".join("d" if isinstance(cell, DateCell) else "e" for cell in cells)

    assert kinds.strip("e") == "d" * 30


def test_weekday_header_rotates():
    assert weekday_header(Weekday.MONDAY)[0] is Weekday.MONDAY
    assert weekday_header(Weekday.MONDAY)[-1] is Weekday.SUNDAY
    assert [d.short_name for d in weekday_header(Weekday.WEDNESDAY)] == [
        "Wed", "Thu", "Fri", "Sat", "Sun", "Mon", "Tue",
    ]


def test_month_rows_chunks_by_week():
    rows = month_rows(build_month_cells(2024, 3, Weekday.MONDAY))

    assert len(rows) == 5
    assert all(len(row) == 7 for row in rows)


def test_shift_month_across_years():
    assert shift_month(2024, 1, -1) == (2023, 12)
    assert shift_month(2024, 12, 1) == (2025, 1)
    assert shift_month(2024, 3, 0) == (2024, 3)
    assert shift_month(2024, 3, -15) == (2022, 12)


def test_days_in_month_handles_leap_years():
    assert days_in_month(2024, 2) == 29
    assert days_in_month(2023, 2) == 28
    assert days_in_month(1900, 2) == 28
    assert days_in_month(2000, 2) == 29
    assert days_in_month(2024, 12) == 31
