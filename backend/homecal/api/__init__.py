"""
API routers for the household calendar.
"""
from homecal.api import auth, events, calendar, links, search, feed

__all__ = [
    "auth",
    "events",
    "calendar",
    "links",
    "search",
    "feed",
]
