"""Document-store implementation of the Account repository."""

from domain.entities.account import Account
from domain.repositories.document_store import (
    SERVER_TIMESTAMP,
    DocumentSnapshot,
    FieldFilter,
    IDocumentStore,
)

ACCOUNTS_COLLECTION = "auth_accounts"
REVOKED_SESSIONS_COLLECTION = "revoked_sessions"


class DocumentAccountRepository:
    """IAccountRepository backed by two private collections."""

    def __init__(self, store: IDocumentStore) -> None:
        self._store = store

    async def get_by_email(self, email: str) -> Account | None:
        """Get the first account registered for an email."""
        snapshots = await self._store.get_all(
            ACCOUNTS_COLLECTION, where=FieldFilter("email", email)
        )
        return self._to_entity(snapshots[0]) if snapshots else None

    async def create(self, account: Account) -> Account:
        """Create a new account."""
        snapshot = await self._store.add(
            ACCOUNTS_COLLECTION,
            {
                "email": account.email,
                "passwordHash": account.password_hash,
                "createdAt": SERVER_TIMESTAMP,
            },
        )
        return self._to_entity(snapshot)

    async def revoke_session(self, token_id: str, email: str) -> None:
        """Record a signed-out token id."""
        await self._store.add(
            REVOKED_SESSIONS_COLLECTION,
            {"jti": token_id, "email": email, "revokedAt": SERVER_TIMESTAMP},
        )

    async def is_session_revoked(self, token_id: str) -> bool:
        """Check whether a token id has been signed out."""
        snapshots = await self._store.get_all(
            REVOKED_SESSIONS_COLLECTION, where=FieldFilter("jti", token_id)
        )
        return bool(snapshots)

    def _to_entity(self, snapshot: DocumentSnapshot) -> Account:
        """Convert a stored document to a domain entity."""
        return Account(
            id=snapshot.id,
            email=snapshot.data.get("email", ""),
            password_hash=snapshot.data.get("passwordHash", ""),
        )
