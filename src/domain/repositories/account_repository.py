"""Account repository protocol."""

from typing import Protocol

from domain.entities.account import Account


class IAccountRepository(Protocol):
    """Repository interface for login accounts and ended sessions."""

    async def get_by_email(self, email: str) -> Account | None:
        """Get the account registered for an email."""
        ...

    async def create(self, account: Account) -> Account:
        """Create a new account."""
        ...

    async def revoke_session(self, token_id: str, email: str) -> None:
        """Record that a session token has been signed out."""
        ...

    async def is_session_revoked(self, token_id: str) -> bool:
        """Check whether a session token has been signed out."""
        ...
