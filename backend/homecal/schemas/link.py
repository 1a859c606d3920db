"""
Shared link schemas.
"""
from typing import Optional, List
from pydantic import BaseModel, field_validator

from homecal.core.models import SharedLink


class LinkCreate(BaseModel):
    url: str
    title: Optional[str] = None
    description: Optional[str] = None
    image_url: Optional[str] = None
    category: str = ""


class ShareRequest(BaseModel):
    """Raw text handed over by a share sheet."""

    text: str = ""
    subject: str = ""


class CategoryUpdate(BaseModel):
    category: str


class CommentCreate(BaseModel):
    message: str

    @field_validator("message")
    @classmethod
    def message_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Comment cannot be empty")
        return value


class CommentResponse(BaseModel):
    id: str
    author_uid: str
    author_name: str
    message: str
    created_at: int


class LinkResponse(BaseModel):
    id: str
    title: str
    url: str
    description: Optional[str] = None
    image_url: Optional[str] = None
    category: str = ""
    shared_by_uid: str
    shared_by_name: str
    shared_at: int
    comments: List[CommentResponse] = []

    @classmethod
    def from_link(cls, link: SharedLink) -> "LinkResponse":
        return cls(
            id=link.id,
            title=link.title,
            url=link.url,
            description=link.description,
            image_url=link.image_url,
            category=link.category,
            shared_by_uid=link.shared_by_uid,
            shared_by_name=link.shared_by_name,
            shared_at=link.shared_at,
            comments=[
                CommentResponse(
                    id=comment.id,
                    author_uid=comment.author_uid,
                    author_name=comment.author_name or "Someone",
                    message=comment.message,
                    created_at=comment.created_at,
                )
                for comment in link.comments
            ],
        )
