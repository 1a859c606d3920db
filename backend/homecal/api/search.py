"""
Search across household events and links.
"""
from datetime import tzinfo

from fastapi import APIRouter, Depends, Query

from homecal.config import settings
from homecal.core.models import UserProfile
from homecal.core.search import search_events, search_links
from homecal.schemas.calendar import SearchResponse
from homecal.schemas.event import EventResponse
from homecal.schemas.link import LinkResponse
from homecal.services.repository import HouseholdRepository
from homecal.api.deps import get_profile, get_repository, get_zone

router = APIRouter()


@router.get("", response_model=SearchResponse)
async def search(
    q: str = Query("", description="Text to look for"),
    mode: str = Query("events", pattern="^(events|links)$"),
    profile: UserProfile = Depends(get_profile),
    zone: tzinfo = Depends(get_zone),
    repo: HouseholdRepository = Depends(get_repository),
):
    """Case-insensitive substring search. A blank query returns nothing."""
    if mode == "links":
        links = search_links(await repo.list_links(profile.household_code), q)
        return SearchResponse(query=q, mode=mode, links=[LinkResponse.from_link(l) for l in links])

    events = search_events(await repo.list_events(profile.household_code), q)
    return SearchResponse(
        query=q,
        mode=mode,
        events=[EventResponse.from_event(e, zone, settings.default_event_color) for e in events],
    )
