"""
Calendar date and event layout engine.

Pure functions over immutable values: no I/O, no clock reads, no implicit zone.
"""
from homecal.core.models import Event, LinkComment, RepeatFrequency, SharedLink, UserProfile, Weekday
from homecal.core.grid import DateCell, EmptyCell, GridCell, build_month_cells, month_rows, weekday_header
from homecal.core.indexer import dates_with_events, day_view, index_by_date, month_view, upcoming
from homecal.core.projector import DaySpan, HourRow, build_hour_rows, project_day, project_onto_day
from homecal.core.search import filter_links_by_category, link_categories, search_events, search_links

__all__ = [
    "Event",
    "LinkComment",
    "RepeatFrequency",
    "SharedLink",
    "UserProfile",
    "Weekday",
    "DateCell",
    "EmptyCell",
    "GridCell",
    "build_month_cells",
    "month_rows",
    "weekday_header",
    "index_by_date",
    "day_view",
    "month_view",
    "dates_with_events",
    "upcoming",
    "DaySpan",
    "HourRow",
    "project_onto_day",
    "project_day",
    "build_hour_rows",
    "search_events",
    "search_links",
    "link_categories",
    "filter_links_by_category",
]
