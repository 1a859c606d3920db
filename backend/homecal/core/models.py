"""
Plain value types shared by the calendar engine.
"""
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Optional, Tuple


class RepeatFrequency(str, Enum):
    """Intended recurrence of an event. Stored as a label, never expanded."""

    NONE = "NONE"
    DAILY = "DAILY"
    WEEKLY = "WEEKLY"
    MONTHLY = "MONTHLY"
    YEARLY = "YEARLY"

    @property
    def display_name(self) -> str:
        if self is RepeatFrequency.NONE:
            return "Does not repeat"
        return self.value.capitalize()


class Weekday(IntEnum):
    """ISO weekday numbers, matching ``date.isoweekday()``."""

    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    SUNDAY = 7

    @property
    def short_name(self) -> str:
        return self.name[:3].capitalize()


@dataclass(frozen=True)
class Event:
    id: str = ""
    title: str = ""
    start_epoch_millis: int = 0
    end_epoch_millis: int = 0
    all_day: bool = False
    repeat_frequency: RepeatFrequency = RepeatFrequency.NONE
    notes: Optional[str] = None
    color_argb: Optional[int] = None
    person_tag: Optional[str] = None


@dataclass(frozen=True)
class UserProfile:
    uid: str = ""
    display_name: str = ""
    household_code: str = ""


@dataclass(frozen=True)
class LinkComment:
    id: str = ""
    author_uid: str = ""
    author_name: str = ""
    message: str = ""
    created_at: int = 0


@dataclass(frozen=True)
class SharedLink:
    id: str = ""
    title: str = ""
    url: str = ""
    description: Optional[str] = None
    image_url: Optional[str] = None
    category: str = ""
    shared_by_uid: str = ""
    shared_by_name: str = ""
    shared_at: int = 0
    comments: Tuple[LinkComment, ...] = field(default_factory=tuple)
