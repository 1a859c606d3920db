"""
SQLAlchemy models for the household calendar database.
"""
from homecal.models.user import User
from homecal.models.event import HouseholdEvent
from homecal.models.link import SharedLinkRecord, LinkCommentRecord

__all__ = [
    "User",
    "HouseholdEvent",
    "SharedLinkRecord",
    "LinkCommentRecord",
]
