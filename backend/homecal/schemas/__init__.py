"""
Pydantic schemas for request/response validation.
"""
from homecal.schemas.auth import (
    UserCreate,
    UserLogin,
    UserResponse,
    UserUpdate,
    Token,
    TokenRefresh,
)
from homecal.schemas.event import EventCreate, EventResponse
from homecal.schemas.link import (
    LinkCreate,
    ShareRequest,
    CategoryUpdate,
    CommentCreate,
    CommentResponse,
    LinkResponse,
)
from homecal.schemas.calendar import (
    GridCellResponse,
    DayEvents,
    MonthResponse,
    HourRowResponse,
    DayResponse,
    SearchResponse,
)

__all__ = [
    "UserCreate",
    "UserLogin",
    "UserResponse",
    "UserUpdate",
    "Token",
    "TokenRefresh",
    "EventCreate",
    "EventResponse",
    "LinkCreate",
    "ShareRequest",
    "CategoryUpdate",
    "CommentCreate",
    "CommentResponse",
    "LinkResponse",
    "GridCellResponse",
    "DayEvents",
    "MonthResponse",
    "HourRowResponse",
    "DayResponse",
    "SearchResponse",
]
