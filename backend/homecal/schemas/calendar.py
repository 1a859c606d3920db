"""
Month grid, day schedule and search schemas.
"""
from datetime import date
from typing import Optional, List
from pydantic import BaseModel

from homecal.schemas.event import EventResponse
from homecal.schemas.link import LinkResponse


class GridCellResponse(BaseModel):
    kind: str  # 'date' or 'empty'
    day: Optional[date] = None
    is_today: bool = False
    has_events: bool = False
    event_count: int = 0
    event_colors: List[int] = []


class DayEvents(BaseModel):
    day: date
    events: List[EventResponse]


class MonthResponse(BaseModel):
    year: int
    month: int
    first_day_of_week: int
    weekdays: List[str]
    rows: List[List[GridCellResponse]]
    overview: List[DayEvents]


class HourRowResponse(BaseModel):
    hour: int
    label: str
    event: Optional[EventResponse] = None
    start_minute: Optional[int] = None
    end_minute: Optional[int] = None
    additional_count: int = 0
    is_start_hour: bool = False


class DayResponse(BaseModel):
    day: date
    events: List[EventResponse]
    hours: List[HourRowResponse]


class SearchResponse(BaseModel):
    query: str
    mode: str  # 'events' or 'links'
    events: List[EventResponse] = []
    links: List[LinkResponse] = []
