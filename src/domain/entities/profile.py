"""Profile domain entity."""

from dataclasses import dataclass


@dataclass
class UserProfile:
    """Domain entity for a registered user's public profile.

    ``email`` is the natural key every other record refers to; ``id`` is the
    store-assigned document id and stays ``None`` until the profile is saved.
    """

    email: str
    id: str | None = None
    display_name: str | None = None
    avatar_url: str | None = None

    def name_or_email(self) -> str:
        """Name shown in lists: the display name, or the email when unset."""
        return self.display_name if self.display_name else self.email

    def avatar_or(self, default_url: str) -> str:
        """Avatar shown in lists, falling back to a placeholder image."""
        return self.avatar_url if self.avatar_url else default_url
