"""Profile repository protocol."""

from typing import Protocol

from domain.entities.profile import UserProfile


class IProfileRepository(Protocol):
    """Repository interface for UserProfile entities."""

    async def get_all(self) -> list[UserProfile]:
        """Get every profile in store order."""
        ...

    async def find_by_email(self, email: str) -> list[UserProfile]:
        """Get all profiles carrying an email (uniqueness is not enforced)."""
        ...

    async def create(self, profile: UserProfile) -> UserProfile:
        """Create a new profile document."""
        ...

    async def replace(self, profile: UserProfile) -> UserProfile:
        """Overwrite an existing profile document wholesale."""
        ...
