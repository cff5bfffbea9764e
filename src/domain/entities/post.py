"""Post domain entity and feed ordering rules."""

from dataclasses import dataclass, field
from datetime import datetime
from functools import cmp_to_key
from uuid import uuid4


def generate_post_id() -> str:
    """Client-side identifier carried inside the post body."""
    return uuid4().hex


@dataclass
class Post:
    """Domain entity for a user-authored post.

    Posts are written once and never edited, so ``created_at`` and
    ``is_private`` are fixed at creation. ``created_at`` is ``None`` until the
    store has assigned it.
    """

    title: str
    author_email: str
    post_id: str = field(default_factory=generate_post_id)
    id: str | None = None
    text: str | None = None
    image_url: str | None = None
    created_at: datetime | None = None
    is_private: bool = False

    def date_label(self) -> str:
        """Creation date as MM/DD/YYYY."""
        if self.created_at is None:
            return ""
        created = self.created_at
        return f"{created.month:02d}/{created.day:02d}/{created.year:04d}"

    def time_label(self) -> str:
        """Creation time as HH:MM:SS."""
        if self.created_at is None:
            return ""
        created = self.created_at
        return f"{created.hour:02d}:{created.minute:02d}:{created.second:02d}"


def is_valid_post(title: str | None, text: str | None, image_url: str | None) -> bool:
    """A post needs a title plus some text or an image."""
    return bool(title) and bool(text or image_url)


def _compare_newest_first(a: Post, b: Post) -> int:
    # Missing timestamps compare equal, so those posts keep their place
    if a.created_at is None or b.created_at is None:
        return 0
    if a.created_at > b.created_at:
        return -1
    if a.created_at < b.created_at:
        return 1
    return 0


def visible_posts(posts: list[Post]) -> list[Post]:
    """Public posts only, newest first."""
    public = [post for post in posts if post.is_private is False]
    return sorted(public, key=cmp_to_key(_compare_newest_first))
