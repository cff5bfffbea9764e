"""Pydantic schemas for the feed and composer screens."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from api.v1.schemas.common import ScreenEffects


class PostCreate(BaseModel):
    """Schema for submitting the composer.

    Emptiness rules are checked by the composer itself so the user gets the
    same message whichever field is missing.
    """

    title: str = Field("", max_length=255)
    text: str = Field("", max_length=5000)
    image_url: str = Field("", max_length=2000)
    is_private: bool = False


class PostResponse(BaseModel):
    """Schema for a stored post."""

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": "0a1b2c3d4e5f40718293a4b5c6d7e8f9",
                "post_id": "9f8e7d6c5b4a40312213f4e5d6c7b8a9",
                "title": "Morning run",
                "text": "5k before breakfast",
                "image_url": None,
                "author_email": "b@x.com",
                "created_at": "2026-01-28T10:00:00+00:00",
                "is_private": False,
            }
        },
    )

    id: str | None
    post_id: str
    title: str
    text: str | None = None
    image_url: str | None = None
    author_email: str
    created_at: datetime | None = None
    is_private: bool


class FeedItemResponse(BaseModel):
    """One rendered feed item."""

    id: str | None
    title: str
    date: str
    time: str
    image_url: str | None = None
    text: str | None = None


class FeedResponse(BaseModel):
    """Schema for the post feed screen."""

    data: list[FeedItemResponse]
    poster: str
    can_compose: bool
    status_message: str | None = None


class PostDetailResponse(ScreenEffects):
    """Schema for a submitted post."""

    data: PostResponse
