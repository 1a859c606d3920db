"""
Shared links and their comment threads.
"""
from typing import Optional
from sqlalchemy import String, Text, BigInteger, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from homecal.database import Base
from homecal.models.user import new_id


class SharedLinkRecord(Base):
    __tablename__ = "shared_links"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    household_code: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    title: Mapped[str] = mapped_column(String(500), nullable=False, default="")
    url: Mapped[str] = mapped_column(Text, nullable=False, default="")
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    image_url: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    category: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    shared_by_uid: Mapped[str] = mapped_column(String(36), nullable=False, default="")
    shared_by_name: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    shared_at: Mapped[int] = mapped_column(BigInteger, nullable=False, index=True)

    comments: Mapped[list["LinkCommentRecord"]] = relationship(
        "LinkCommentRecord",
        back_populates="link",
        cascade="all, delete-orphan",
        order_by="LinkCommentRecord.created_at",
        lazy="selectin",
    )


class LinkCommentRecord(Base):
    __tablename__ = "link_comments"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    link_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("shared_links.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    author_uid: Mapped[str] = mapped_column(String(36), nullable=False, default="")
    author_name: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    message: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[int] = mapped_column(BigInteger, nullable=False)

    link: Mapped["SharedLinkRecord"] = relationship("SharedLinkRecord", back_populates="comments")
