"""
HouseholdEvent model: one stored occurrence of a shared calendar event.
"""
from datetime import datetime
from typing import Optional
from sqlalchemy import String, DateTime, Text, Boolean, BigInteger
from sqlalchemy.orm import Mapped, mapped_column

from homecal.database import Base
from homecal.models.user import new_id


class HouseholdEvent(Base):
    __tablename__ = "household_events"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    household_code: Mapped[str] = mapped_column(String(64), nullable=False, index=True)

    # Event details
    title: Mapped[str] = mapped_column(String(500), nullable=False)
    start_epoch_millis: Mapped[int] = mapped_column(BigInteger, nullable=False, index=True)
    end_epoch_millis: Mapped[int] = mapped_column(BigInteger, nullable=False)
    all_day: Mapped[bool] = mapped_column(Boolean, default=False)
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    person_tag: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    # Label only; occurrences are never expanded
    repeat_frequency: Mapped[str] = mapped_column(String(20), nullable=False, default="NONE")

    # Unsigned 32-bit ARGB, NULL/0 means the client default
    color_argb: Mapped[Optional[int]] = mapped_column(BigInteger, nullable=True)

    created_by_uid: Mapped[Optional[str]] = mapped_column(String(36), nullable=True)

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, onupdate=datetime.utcnow
    )
