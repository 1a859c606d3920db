"""
Month grid construction.

A month is laid out as rows of seven cells. Cells before the 1st and after the
last day are padding; the grid is only as tall as the month needs (4, 5 or 6
rows).
"""
from dataclasses import dataclass
from datetime import date
from typing import List, Sequence, Union

from homecal.core.dates import days_in_month
from homecal.core.models import Weekday

DAYS_PER_WEEK = 7


@dataclass(frozen=True)
class DateCell:
    date: date


@dataclass(frozen=True)
class EmptyCell:
    pass


GridCell = Union[DateCell, EmptyCell]


def build_month_cells(year: int, month: int, first_day_of_week: Weekday) -> List[GridCell]:
    """
    Build the cells for one month.

    Args:
        year: Calendar year
        month: Month number, 1-12
        first_day_of_week: Weekday shown in the first column

    Returns:
        Leading padding, one DateCell per day in ascending order, then trailing
        padding up to a multiple of seven
    """
    first_of_month = date(year, month, 1)
    length = days_in_month(year, month)
    leading = (first_of_month.isoweekday() - int(first_day_of_week) + DAYS_PER_WEEK) % DAYS_PER_WEEK
    trailing = (DAYS_PER_WEEK - (leading + length) % DAYS_PER_WEEK) % DAYS_PER_WEEK

    cells: List[GridCell] = [EmptyCell() for _ in range(leading)]
    cells.extend(DateCell(date(year, month, day)) for day in range(1, length + 1))
    cells.extend(EmptyCell() for _ in range(trailing))
    return cells


def weekday_header(first_day_of_week: Weekday) -> List[Weekday]:
    """The seven weekdays in column order."""
    start = int(first_day_of_week)
    return [Weekday((start - 1 + offset) % DAYS_PER_WEEK + 1) for offset in range(DAYS_PER_WEEK)]


def month_rows(cells: Sequence[GridCell]) -> List[List[GridCell]]:
    return [list(cells[i:i + DAYS_PER_WEEK]) for i in range(0, len(cells), DAYS_PER_WEEK)]
