"""
Persistence and live-update services for the household calendar.
"""
from homecal.services.feed import HouseholdFeed, Snapshot, Subscription, feed
from homecal.services.repository import HouseholdRepository, ensure_profile

__all__ = [
    "HouseholdFeed",
    "Snapshot",
    "Subscription",
    "feed",
    "HouseholdRepository",
    "ensure_profile",
]
