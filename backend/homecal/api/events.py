"""
Household event endpoints.
"""
from datetime import tzinfo
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, status, Query

from homecal.config import settings
from homecal.core.dates import all_day_span, at_time_millis
from homecal.core.formatting import normalize_argb
from homecal.core.indexer import upcoming
from homecal.core.models import Event, UserProfile
from homecal.schemas.event import EventCreate, EventResponse
from homecal.services.repository import HouseholdRepository, now_millis
from homecal.api.deps import get_profile, get_repository, get_zone

router = APIRouter()


def event_from_form(data: EventCreate, zone: tzinfo, event_id: str = "") -> Event:
    """Turn editor input into an event with absolute start/end instants."""
    if data.all_day:
        start, end = all_day_span(data.day, data.last_day, zone)
    else:
        start = at_time_millis(data.day, data.start_time, zone)
        end = at_time_millis(data.day, data.end_time, zone)

    return Event(
        id=event_id,
        title=data.title,
        start_epoch_millis=start,
        end_epoch_millis=end,
        all_day=data.all_day,
        repeat_frequency=data.repeat_frequency,
        notes=(data.notes or "").strip() or None,
        color_argb=normalize_argb(data.color_argb) if data.color_argb else None,
        person_tag=(data.person_tag or "").strip() or None,
    )


@router.get("", response_model=List[EventResponse])
async def list_events(
    profile: UserProfile = Depends(get_profile),
    zone: tzinfo = Depends(get_zone),
    repo: HouseholdRepository = Depends(get_repository),
):
    """All household events, by start instant."""
    events = await repo.list_events(profile.household_code)
    return [EventResponse.from_event(e, zone, settings.default_event_color) for e in events]


@router.get("/upcoming", response_model=List[EventResponse])
async def list_upcoming(
    now: Optional[int] = Query(None, description="Reference instant (epoch millis), defaults to server time"),
    profile: UserProfile = Depends(get_profile),
    zone: tzinfo = Depends(get_zone),
    repo: HouseholdRepository = Depends(get_repository),
):
    """Events that have not ended yet."""
    events = await repo.list_events(profile.household_code)
    reference = now if now is not None else now_millis()
    return [
        EventResponse.from_event(e, zone, settings.default_event_color)
        for e in upcoming(events, reference)
    ]


@router.get("/{event_id}", response_model=EventResponse)
async def get_event(
    event_id: str,
    profile: UserProfile = Depends(get_profile),
    zone: tzinfo = Depends(get_zone),
    repo: HouseholdRepository = Depends(get_repository),
):
    event = await repo.get_event(profile.household_code, event_id)
    if not event:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Event not found",
        )
    return EventResponse.from_event(event, zone, settings.default_event_color)


@router.post("", response_model=EventResponse, status_code=status.HTTP_201_CREATED)
async def create_event(
    event_data: EventCreate,
    profile: UserProfile = Depends(get_profile),
    zone: tzinfo = Depends(get_zone),
    repo: HouseholdRepository = Depends(get_repository),
):
    """Create a new household event."""
    saved = await repo.upsert_event(profile, event_from_form(event_data, zone))
    return EventResponse.from_event(saved, zone, settings.default_event_color)


@router.put("/{event_id}", response_model=EventResponse)
async def update_event(
    event_id: str,
    event_data: EventCreate,
    profile: UserProfile = Depends(get_profile),
    zone: tzinfo = Depends(get_zone),
    repo: HouseholdRepository = Depends(get_repository),
):
    """Replace an event's fields, keeping its id."""
    try:
        saved = await repo.upsert_event(profile, event_from_form(event_data, zone, event_id))
    except LookupError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Event not found",
        )
    return EventResponse.from_event(saved, zone, settings.default_event_color)


@router.delete("/{event_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_event(
    event_id: str,
    profile: UserProfile = Depends(get_profile),
    repo: HouseholdRepository = Depends(get_repository),
):
    """Delete a household event."""
    deleted = await repo.delete_event(profile, event_id)
    if not deleted:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Event not found",
        )
