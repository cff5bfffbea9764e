"""Post repository protocol."""

from typing import Protocol

from domain.entities.post import Post


class IPostRepository(Protocol):
    """Repository interface for Post entities."""

    async def get_by_author(self, author_email: str) -> list[Post]:
        """Get all posts (public and private) written by an email."""
        ...

    async def create(self, post: Post) -> Post:
        """Create a new post; the store assigns ``created_at``."""
        ...
