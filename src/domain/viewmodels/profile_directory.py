"""Profile directory screen: every user, caller first."""

from dataclasses import dataclass

from core.retry import ReadPolicy
from domain.entities.profile import UserProfile
from domain.entities.view_state import Screen
from domain.repositories.profile_repository import IProfileRepository
from domain.viewmodels.base import ViewModel
from domain.viewmodels.ports import INavigator, ISessionSignal


@dataclass(frozen=True, slots=True)
class DirectoryEntry:
    """One row of the directory, with display fallbacks already applied."""

    profile: UserProfile
    name: str
    avatar_url: str
    is_current_user: bool


def order_directory(profiles: list[UserProfile], current_email: str | None) -> list[UserProfile]:
    """Move the caller's profile to the front; keep everyone else in store order.

    Only the first profile matching the caller is promoted.
    """
    own = next((p for p in profiles if current_email and p.email == current_email), None)
    if own is None:
        return list(profiles)
    return [own, *(p for p in profiles if p is not own)]


class ProfileDirectoryViewModel(ViewModel):
    """Lists all profiles and routes to a selected user's posts."""

    screen_name = "profile_directory"

    def __init__(
        self,
        profiles: IProfileRepository,
        session: ISessionSignal,
        navigator: INavigator,
        default_avatar_url: str,
        read_policy: ReadPolicy | None = None,
    ) -> None:
        super().__init__(session, read_policy)
        self._profiles = profiles
        self._navigator = navigator
        self._default_avatar_url = default_avatar_url
        self.entries: list[DirectoryEntry] = []

    async def on_focus(self) -> bool:
        """Refetch the directory."""
        current_email = self._session.current_email()
        return await self._load(
            self._profiles.get_all,
            lambda profiles: self._apply(profiles, current_email),
        )

    def select(self, entry: DirectoryEntry) -> None:
        """Open the post feed scoped to the entry's email."""
        self._navigator.navigate(Screen.POSTS_LIST, poster=entry.profile.email)

    def _apply(self, profiles: list[UserProfile], current_email: str | None) -> None:
        self.entries = [
            DirectoryEntry(
                profile=profile,
                name=profile.name_or_email(),
                avatar_url=profile.avatar_or(self._default_avatar_url),
                is_current_user=bool(current_email) and profile.email == current_email,
            )
            for profile in order_directory(profiles, current_email)
        ]
