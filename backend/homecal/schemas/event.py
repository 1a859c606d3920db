"""
Event schemas.
"""
from datetime import date, time, tzinfo
from typing import Optional
from pydantic import BaseModel, field_validator, model_validator

from homecal.core.formatting import contrasting_text_color, describe_time_range, effective_color
from homecal.core.models import Event, RepeatFrequency


class EventCreate(BaseModel):
    """Event as entered in the editor: a local date plus times, or all-day."""

    title: str
    day: date
    all_day: bool = False
    last_day: Optional[date] = None  # all-day events spanning several days
    start_time: time = time(9, 0)
    end_time: time = time(10, 0)
    repeat_frequency: RepeatFrequency = RepeatFrequency.NONE
    color_argb: Optional[int] = None
    notes: Optional[str] = None
    person_tag: Optional[str] = None

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Please enter a title")
        return value

    @field_validator("day", "last_day")
    @classmethod
    def day_in_range(cls, value: Optional[date]) -> Optional[date]:
        # Instants within a day of either end can't be converted in every zone
        if value is not None and not date.min < value < date.max:
            raise ValueError("Date is out of range")
        return value

    @model_validator(mode="after")
    def end_after_start(self) -> "EventCreate":
        if not self.all_day and self.end_time <= self.start_time:
            raise ValueError("End time must be after start time")
        return self


class EventResponse(BaseModel):
    id: str
    title: str
    start_epoch_millis: int
    end_epoch_millis: int
    all_day: bool
    repeat_frequency: RepeatFrequency
    repeat_label: str
    notes: Optional[str] = None
    person_tag: Optional[str] = None
    color_argb: int
    text_color_argb: int
    time_range: str

    @classmethod
    def from_event(cls, event: Event, zone: tzinfo, default_color: int) -> "EventResponse":
        color = effective_color(event, default_color)
        return cls(
            id=event.id,
            title=event.title,
            start_epoch_millis=event.start_epoch_millis,
            end_epoch_millis=event.end_epoch_millis,
            all_day=event.all_day,
            repeat_frequency=event.repeat_frequency,
            repeat_label=event.repeat_frequency.display_name,
            notes=event.notes,
            person_tag=event.person_tag,
            color_argb=color,
            text_color_argb=contrasting_text_color(color),
            time_range=describe_time_range(event, zone),
        )
