"""
In-process live feed of household snapshots.

Writers publish the full, current collection after every change; subscribers
receive whole snapshots and recompute their views from them.
"""
import asyncio
import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Set, Tuple, Union

from homecal.core.models import Event, SharedLink

logger = logging.getLogger(__name__)

EVENTS = "events"
LINKS = "links"

_CLOSED = object()


@dataclass(frozen=True)
class Snapshot:
    topic: str
    items: Union[Tuple[Event, ...], Tuple[SharedLink, ...]]


class Subscription:
    """Async iterator of snapshots for one household, ended by ``cancel()``."""

    def __init__(self, feed: "HouseholdFeed", household_code: str):
        self.household_code = household_code
        self._feed = feed
        self._queue: asyncio.Queue = asyncio.Queue()
        self._cancelled = False

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def deliver(self, snapshot: Snapshot) -> None:
        if not self._cancelled:
            self._queue.put_nowait(snapshot)

    def cancel(self) -> None:
        if self._cancelled:
            return
        self._cancelled = True
        self._feed.unsubscribe(self)
        self._queue.put_nowait(_CLOSED)

    async def next(self, timeout: Optional[float] = None) -> Optional[Snapshot]:
        """Next snapshot, or None once cancelled."""
        item = await asyncio.wait_for(self._queue.get(), timeout)
        if item is _CLOSED:
            return None
        return item

    def __aiter__(self):
        return self

    async def __anext__(self) -> Snapshot:
        snapshot = await self.next()
        if snapshot is None:
            raise StopAsyncIteration
        return snapshot


class HouseholdFeed:
    def __init__(self):
        self._subscribers: Dict[str, Set[Subscription]] = {}

    def subscribe(self, household_code: str) -> Subscription:
        subscription = Subscription(self, household_code)
        self._subscribers.setdefault(household_code, set()).add(subscription)
        logger.debug("Feed subscription opened for household %s", household_code)
        return subscription

    def unsubscribe(self, subscription: Subscription) -> None:
        subscribers = self._subscribers.get(subscription.household_code)
        if not subscribers:
            return
        subscribers.discard(subscription)
        if not subscribers:
            del self._subscribers[subscription.household_code]
        logger.debug("Feed subscription closed for household %s", subscription.household_code)

    def subscriber_count(self, household_code: str) -> int:
        return len(self._subscribers.get(household_code, ()))

    def publish(self, household_code: str, topic: str, items: List) -> int:
        """Send a snapshot to every subscriber of the household. Returns the number reached."""
        snapshot = Snapshot(topic=topic, items=tuple(items))
        delivered = 0
        for subscription in list(self._subscribers.get(household_code, ())):
            try:
                subscription.deliver(snapshot)
                delivered += 1
            except Exception:
                logger.warning(
                    "Dropping feed subscriber for household %s", household_code, exc_info=True
                )
                subscription.cancel()
        return delivered


feed = HouseholdFeed()
