"""Document-store implementation of the Profile repository."""

from typing import Any

from domain.entities.profile import UserProfile
from domain.repositories.document_store import (
    DocumentRef,
    DocumentSnapshot,
    FieldFilter,
    IDocumentStore,
)

PROFILES_COLLECTION = "user_data"


class DocumentProfileRepository:
    """IProfileRepository backed by the ``user_data`` collection."""

    def __init__(self, store: IDocumentStore) -> None:
        self._store = store

    async def get_all(self) -> list[UserProfile]:
        """Get every profile in store order."""
        snapshots = await self._store.get_all(PROFILES_COLLECTION)
        return [self._to_entity(snapshot) for snapshot in snapshots]

    async def find_by_email(self, email: str) -> list[UserProfile]:
        """Get profiles whose ``email`` field equals ``email``."""
        snapshots = await self._store.get_all(
            PROFILES_COLLECTION, where=FieldFilter("email", email)
        )
        return [self._to_entity(snapshot) for snapshot in snapshots]

    async def create(self, profile: UserProfile) -> UserProfile:
        """Create a new profile document."""
        snapshot = await self._store.add(PROFILES_COLLECTION, self._to_document(profile))
        return self._to_entity(snapshot)

    async def replace(self, profile: UserProfile) -> UserProfile:
        """Overwrite an existing profile document wholesale."""
        if profile.id is None:
            raise ValueError("Cannot replace a profile that has no document id")
        snapshot = await self._store.set(
            DocumentRef(collection=PROFILES_COLLECTION, id=profile.id),
            self._to_document(profile),
        )
        return self._to_entity(snapshot)

    def _to_entity(self, snapshot: DocumentSnapshot) -> UserProfile:
        """Convert a stored document to a domain entity."""
        data = snapshot.data
        return UserProfile(
            id=snapshot.id,
            email=data.get("email", ""),
            display_name=data.get("displayName"),
            avatar_url=data.get("avatar"),
        )

    def _to_document(self, entity: UserProfile) -> dict[str, Any]:
        """Convert a domain entity to a document body."""
        document: dict[str, Any] = {"email": entity.email}
        if entity.display_name is not None:
            document["displayName"] = entity.display_name
        if entity.avatar_url is not None:
            document["avatar"] = entity.avatar_url
        return document
