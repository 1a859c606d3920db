"""
Calendar views: month grid and hour-by-hour day schedule.
"""
from datetime import date, datetime, tzinfo
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status, Query

from homecal.config import settings
from homecal.core.formatting import effective_color
from homecal.core.grid import DateCell, build_month_cells, month_rows, weekday_header
from homecal.core.indexer import dates_with_events, day_view, index_by_date, month_view
from homecal.core.models import UserProfile, Weekday
from homecal.core.projector import build_hour_rows
from homecal.schemas.calendar import (
    DayEvents,
    DayResponse,
    GridCellResponse,
    HourRowResponse,
    MonthResponse,
)
from homecal.schemas.event import EventResponse
from homecal.services.repository import HouseholdRepository
from homecal.api.deps import get_profile, get_repository, get_zone

router = APIRouter()

# Color dots shown under a day number
MAX_CELL_COLORS = 3


def _weekday(value: Optional[int]) -> Weekday:
    try:
        return Weekday(value if value is not None else settings.first_day_of_week)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="first_day_of_week must be an ISO weekday between 1 (Monday) and 7 (Sunday)",
        )


@router.get("/month/{year}/{month}", response_model=MonthResponse)
async def get_month(
    year: int,
    month: int,
    first_day_of_week: Optional[int] = Query(None, description="ISO weekday of the first column"),
    today: Optional[date] = Query(None, description="Date to highlight, defaults to the current local date"),
    profile: UserProfile = Depends(get_profile),
    zone: tzinfo = Depends(get_zone),
    repo: HouseholdRepository = Depends(get_repository),
):
    """Month grid with per-day event markers and the month's event overview."""
    if not 1 <= month <= 12 or not 1 <= year <= 9999:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid year or month",
        )

    first_day = _weekday(first_day_of_week)
    highlight = today or datetime.now(zone).date()

    index = index_by_date(await repo.list_events(profile.household_code), zone)
    marked = dates_with_events(index, year, month)

    cells = []
    for cell in build_month_cells(year, month, first_day):
        if isinstance(cell, DateCell):
            bucket = day_view(index, cell.date)
            cells.append(
                GridCellResponse(
                    kind="date",
                    day=cell.date,
                    is_today=cell.date == highlight,
                    has_events=cell.date in marked,
                    event_count=len(bucket),
                    event_colors=[
                        effective_color(e, settings.default_event_color)
                        for e in bucket[:MAX_CELL_COLORS]
                    ],
                )
            )
        else:
            cells.append(GridCellResponse(kind="empty"))

    return MonthResponse(
        year=year,
        month=month,
        first_day_of_week=int(first_day),
        weekdays=[day.short_name for day in weekday_header(first_day)],
        rows=month_rows(cells),
        overview=[
            DayEvents(
                day=day,
                events=[EventResponse.from_event(e, zone, settings.default_event_color) for e in events],
            )
            for day, events in month_view(index, year, month)
        ],
    )


@router.get("/day/{day}", response_model=DayResponse)
async def get_day(
    day: date,
    profile: UserProfile = Depends(get_profile),
    zone: tzinfo = Depends(get_zone),
    repo: HouseholdRepository = Depends(get_repository),
):
    """Events starting on ``day`` plus 24 hour rows covering everything that touches it."""
    events = await repo.list_events(profile.household_code)
    index = index_by_date(events, zone)

    def respond(event):
        return EventResponse.from_event(event, zone, settings.default_event_color)

    hours = []
    for row in build_hour_rows(events, day, zone):
        hours.append(
            HourRowResponse(
                hour=row.hour,
                label=f"{row.hour:02d}:00",
                event=respond(row.primary) if row.primary else None,
                start_minute=row.primary_span.start_minute if row.primary_span else None,
                end_minute=row.primary_span.end_minute if row.primary_span else None,
                additional_count=row.additional_count,
                is_start_hour=row.is_start_hour,
            )
        )

    return DayResponse(
        day=day,
        events=[respond(e) for e in day_view(index, day)],
        hours=hours,
    )
