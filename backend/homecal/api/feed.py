"""
Live household snapshots over a WebSocket.

The first two messages are the current events and links; after that a full
snapshot is pushed whenever either collection changes.
"""
import asyncio
import logging
from datetime import tzinfo
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, WebSocket, WebSocketDisconnect, status
from sqlalchemy.ext.asyncio import AsyncSession

from homecal.config import settings
from homecal.database import get_db
from homecal.schemas.event import EventResponse
from homecal.schemas.link import LinkResponse
from homecal.services.feed import EVENTS, LINKS, Snapshot, Subscription, feed
from homecal.services.repository import HouseholdRepository, ensure_profile
from homecal.api.deps import user_from_token, zone_for

logger = logging.getLogger(__name__)

router = APIRouter()


def snapshot_payload(snapshot: Snapshot, zone: tzinfo) -> dict:
    if snapshot.topic == EVENTS:
        items = [
            EventResponse.from_event(e, zone, settings.default_event_color).model_dump(mode="json")
            for e in snapshot.items
        ]
    else:
        items = [LinkResponse.from_link(link).model_dump(mode="json") for link in snapshot.items]
    return {"topic": snapshot.topic, "items": items}


async def _pump(websocket: WebSocket, subscription: Subscription, zone: tzinfo) -> None:
    async for snapshot in subscription:
        await websocket.send_json(snapshot_payload(snapshot, zone))


async def _receive_until_closed(websocket: WebSocket) -> None:
    # Client messages are ignored; receiving only detects the disconnect.
    while True:
        await websocket.receive_text()


def _client_left(task: asyncio.Task) -> bool:
    return not task.cancelled() and isinstance(task.exception(), WebSocketDisconnect)


async def stream_snapshots(websocket: WebSocket, subscription: Subscription, zone: tzinfo) -> None:
    """
    Forward snapshots to the socket until either side stops.

    A client disconnect ends the stream. If forwarding stops while the client
    is still connected, the socket is closed with an internal error.
    """
    pump = asyncio.create_task(_pump(websocket, subscription, zone))
    receiver = asyncio.create_task(_receive_until_closed(websocket))
    try:
        done, _ = await asyncio.wait({pump, receiver}, return_when=asyncio.FIRST_COMPLETED)
        if receiver not in done and not _client_left(pump):
            logger.warning("Feed for household %s stopped, closing socket", subscription.household_code)
            await websocket.close(code=status.WS_1011_INTERNAL_ERROR)
    finally:
        subscription.cancel()
        pump.cancel()
        receiver.cancel()
        for result in await asyncio.gather(pump, receiver, return_exceptions=True):
            if isinstance(result, WebSocketDisconnect):
                logger.debug("Feed client for household %s disconnected", subscription.household_code)
            elif isinstance(result, Exception):
                logger.warning(
                    "Feed task for household %s failed", subscription.household_code, exc_info=result
                )


@router.websocket("/feed")
async def household_feed(
    websocket: WebSocket,
    token: str = Query(...),
    tz: Optional[str] = Query(None),
    db: AsyncSession = Depends(get_db),
):
    try:
        user = await user_from_token(token, db)
        zone = zone_for(tz, user)
    except HTTPException:
        await websocket.close(code=status.WS_1008_POLICY_VIOLATION)
        return

    profile = await ensure_profile(db, user)
    repo = HouseholdRepository(db)
    await websocket.accept()

    subscription = feed.subscribe(profile.household_code)
    try:
        # Current collections are queued ahead of any later change
        subscription.deliver(Snapshot(EVENTS, tuple(await repo.list_events(profile.household_code))))
        subscription.deliver(Snapshot(LINKS, tuple(await repo.list_links(profile.household_code))))
        await stream_snapshots(websocket, subscription, zone)
    finally:
        subscription.cancel()
