"""
Household-scoped persistence for events, shared links and comments.
"""
import logging
import time
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from homecal.core.models import Event, LinkComment, RepeatFrequency, SharedLink, UserProfile
from homecal.models.event import HouseholdEvent
from homecal.models.link import LinkCommentRecord, SharedLinkRecord
from homecal.models.user import User, new_id
from homecal.services.feed import EVENTS, LINKS, HouseholdFeed

logger = logging.getLogger(__name__)


def now_millis() -> int:
    return int(time.time() * 1000)


def to_event(record: HouseholdEvent) -> Event:
    return Event(
        id=record.id,
        title=record.title,
        start_epoch_millis=record.start_epoch_millis,
        end_epoch_millis=record.end_epoch_millis,
        all_day=bool(record.all_day),
        repeat_frequency=RepeatFrequency(record.repeat_frequency or RepeatFrequency.NONE.value),
        notes=record.notes,
        color_argb=record.color_argb,
        person_tag=record.person_tag,
    )


def to_link(record: SharedLinkRecord) -> SharedLink:
    return SharedLink(
        id=record.id,
        title=record.title,
        url=record.url,
        description=record.description,
        image_url=record.image_url,
        category=record.category or "",
        shared_by_uid=record.shared_by_uid,
        shared_by_name=record.shared_by_name,
        shared_at=record.shared_at,
        comments=tuple(
            LinkComment(
                id=comment.id,
                author_uid=comment.author_uid,
                author_name=comment.author_name,
                message=comment.message,
                created_at=comment.created_at,
            )
            for comment in sorted(record.comments, key=lambda c: c.created_at)
        ),
    )


def to_profile(user: User) -> UserProfile:
    return UserProfile(
        uid=user.id,
        display_name=user.display_name or user.email,
        household_code=user.household_code,
    )


async def ensure_profile(db: AsyncSession, user: User) -> UserProfile:
    """Give a user without a household their own, derived from the uid."""
    if not user.household_code:
        user.household_code = user.id[:6]
        await db.commit()
        await db.refresh(user)
    return to_profile(user)


class HouseholdRepository:
    """
    Reads and writes for one database session.

    Every write publishes the household's fresh snapshot to the feed.
    """

    def __init__(self, db: AsyncSession, feed: Optional[HouseholdFeed] = None):
        self.db = db
        self.feed = feed

    # --- Events ---

    async def list_events(self, household_code: str) -> List[Event]:
        if not household_code:
            return []
        result = await self.db.execute(
            select(HouseholdEvent)
            .where(HouseholdEvent.household_code == household_code)
            .order_by(HouseholdEvent.start_epoch_millis)
        )
        return [to_event(record) for record in result.scalars().all()]

    async def _event_record(self, household_code: str, event_id: str) -> Optional[HouseholdEvent]:
        result = await self.db.execute(
            select(HouseholdEvent).where(
                HouseholdEvent.id == event_id,
                HouseholdEvent.household_code == household_code,
            )
        )
        return result.scalar_one_or_none()

    async def get_event(self, household_code: str, event_id: str) -> Optional[Event]:
        record = await self._event_record(household_code, event_id)
        return to_event(record) if record else None

    async def upsert_event(self, profile: UserProfile, event: Event) -> Event:
        """
        Insert a new event (blank id) or overwrite an existing one in place.

        Raises:
            LookupError: the id is set but unknown in this household
        """
        record = None
        if event.id:
            record = await self._event_record(profile.household_code, event.id)
            if record is None:
                raise LookupError(f"Event {event.id} not found")
        else:
            record = HouseholdEvent(
                id=new_id(),
                household_code=profile.household_code,
                created_by_uid=profile.uid,
            )
            self.db.add(record)

        record.title = event.title
        record.start_epoch_millis = event.start_epoch_millis
        record.end_epoch_millis = event.end_epoch_millis
        record.all_day = event.all_day
        record.repeat_frequency = event.repeat_frequency.value
        record.notes = event.notes
        record.person_tag = event.person_tag
        record.color_argb = event.color_argb

        await self.db.commit()
        await self.db.refresh(record)
        logger.info("Saved event %s in household %s", record.id, profile.household_code)

        await self._publish_events(profile.household_code)
        return to_event(record)

    async def delete_event(self, profile: UserProfile, event_id: str) -> bool:
        if not profile.household_code or not event_id:
            return False
        record = await self._event_record(profile.household_code, event_id)
        if record is None:
            return False

        await self.db.delete(record)
        await self.db.commit()
        logger.info("Deleted event %s from household %s", event_id, profile.household_code)

        await self._publish_events(profile.household_code)
        return True

    # --- Links ---

    async def list_links(self, household_code: str) -> List[SharedLink]:
        """Household links, most recently shared first."""
        if not household_code:
            return []
        result = await self.db.execute(
            select(SharedLinkRecord)
            .where(SharedLinkRecord.household_code == household_code)
            .order_by(SharedLinkRecord.shared_at.desc())
            .execution_options(populate_existing=True)
        )
        return [to_link(record) for record in result.scalars().all()]

    async def _link_record(self, household_code: str, link_id: str) -> Optional[SharedLinkRecord]:
        result = await self.db.execute(
            select(SharedLinkRecord)
            .where(
                SharedLinkRecord.id == link_id,
                SharedLinkRecord.household_code == household_code,
            )
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def get_link(self, household_code: str, link_id: str) -> Optional[SharedLink]:
        record = await self._link_record(household_code, link_id)
        return to_link(record) if record else None

    async def add_link(self, profile: UserProfile, link: SharedLink) -> SharedLink:
        record = SharedLinkRecord(
            id=link.id or new_id(),
            household_code=profile.household_code,
            title=link.title,
            url=link.url,
            description=link.description,
            image_url=link.image_url,
            category=link.category.strip(),
            shared_by_uid=profile.uid,
            shared_by_name=profile.display_name,
            shared_at=link.shared_at or now_millis(),
        )
        self.db.add(record)
        await self.db.commit()
        record = await self._link_record(profile.household_code, record.id)
        logger.info("Shared link %s in household %s", record.id, profile.household_code)

        await self._publish_links(profile.household_code)
        return to_link(record)

    async def update_link_category(
        self, profile: UserProfile, link_id: str, category: str
    ) -> Optional[SharedLink]:
        if not profile.household_code or not link_id:
            return None
        record = await self._link_record(profile.household_code, link_id)
        if record is None:
            return None

        record.category = category.strip()
        await self.db.commit()
        record = await self._link_record(profile.household_code, link_id)

        await self._publish_links(profile.household_code)
        return to_link(record)

    async def add_link_comment(
        self, profile: UserProfile, link_id: str, comment: LinkComment
    ) -> Optional[SharedLink]:
        """Append a comment. Blank messages and unknown links are ignored (None)."""
        message = comment.message.strip()
        if not profile.household_code or not link_id or not message:
            return None
        record = await self._link_record(profile.household_code, link_id)
        if record is None:
            return None

        self.db.add(
            LinkCommentRecord(
                id=comment.id or new_id(),
                link_id=record.id,
                author_uid=comment.author_uid or profile.uid,
                author_name=comment.author_name or profile.display_name,
                message=message,
                created_at=comment.created_at or now_millis(),
            )
        )
        await self.db.commit()
        record = await self._link_record(profile.household_code, link_id)
        logger.info("Comment added to link %s", link_id)

        await self._publish_links(profile.household_code)
        return to_link(record)

    # --- Feed ---

    async def _publish_events(self, household_code: str) -> None:
        if self.feed and self.feed.subscriber_count(household_code):
            self.feed.publish(household_code, EVENTS, await self.list_events(household_code))

    async def _publish_links(self, household_code: str) -> None:
        if self.feed and self.feed.subscriber_count(household_code):
            self.feed.publish(household_code, LINKS, await self.list_links(household_code))
