"""Document-store implementation of the Post repository."""

from datetime import datetime
from typing import Any

from domain.entities.post import Post
from domain.repositories.document_store import (
    SERVER_TIMESTAMP,
    DocumentSnapshot,
    FieldFilter,
    IDocumentStore,
)

POSTS_COLLECTION = "postify_posts"
AUTHOR_FIELD = "user.userid"


class DocumentPostRepository:
    """IPostRepository backed by the ``postify_posts`` collection.

    Post bodies look like::

        {"id": ..., "title": ..., "text": ..., "imageUrl": ...,
         "createdAt": <timestamp>, "user": {"_id": ..., "userid": <email>},
         "private": false}
    """

    def __init__(self, store: IDocumentStore) -> None:
        self._store = store

    async def get_by_author(self, author_email: str) -> list[Post]:
        """Get all posts written by an email (one equality filter, no ordering)."""
        snapshots = await self._store.get_all(
            POSTS_COLLECTION, where=FieldFilter(AUTHOR_FIELD, author_email)
        )
        return [self._to_entity(snapshot) for snapshot in snapshots]

    async def create(self, post: Post) -> Post:
        """Create a new post; ``createdAt`` is resolved by the store."""
        snapshot = await self._store.add(POSTS_COLLECTION, self._to_document(post))
        return self._to_entity(snapshot)

    def _to_entity(self, snapshot: DocumentSnapshot) -> Post:
        """Convert a stored document to a domain entity."""
        data = snapshot.data
        user = data.get("user") or {}
        created_at = data.get("createdAt")
        return Post(
            id=snapshot.id,
            post_id=str(data.get("id", "")),
            title=data.get("title", ""),
            text=data.get("text"),
            image_url=data.get("imageUrl"),
            author_email=user.get("userid", ""),
            created_at=created_at if isinstance(created_at, datetime) else None,
            # Anything but an explicit false is treated as private
            is_private=data.get("private") is not False,
        )

    def _to_document(self, entity: Post) -> dict[str, Any]:
        """Convert a domain entity to a document body; empty parts are omitted."""
        document: dict[str, Any] = {
            "id": entity.post_id,
            "title": entity.title,
            "createdAt": SERVER_TIMESTAMP,
            "user": {"_id": entity.post_id, "userid": entity.author_email},
            "private": entity.is_private,
        }
        if entity.text:
            document["text"] = entity.text
        if entity.image_url:
            document["imageUrl"] = entity.image_url
        return document
