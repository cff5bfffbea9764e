"""Profile editor (settings) screen."""

import structlog

from core.retry import ReadPolicy
from domain.entities.profile import UserProfile
from domain.entities.view_state import Screen, ViewState
from domain.repositories.profile_repository import IProfileRepository
from domain.viewmodels.base import ViewModel
from domain.viewmodels.ports import INavigator, INotifier, ISessionSignal, Notification

logger = structlog.get_logger()


class ProfileEditorViewModel(ViewModel):
    """Loads the caller's profile, then creates or overwrites it on save."""

    screen_name = "profile_editor"

    def __init__(
        self,
        profiles: IProfileRepository,
        session: ISessionSignal,
        navigator: INavigator,
        notifier: INotifier,
        read_policy: ReadPolicy | None = None,
    ) -> None:
        super().__init__(session, read_policy)
        self._profiles = profiles
        self._navigator = navigator
        self._notifier = notifier
        self.email = ""
        self.display_name = ""
        self.avatar_url = ""
        self.profile_id: str | None = None

    async def on_activate(self) -> bool:
        """Resolve the caller and pull their existing profile, if any."""
        self.email = self._require_email()
        email = self.email
        return await self._load(lambda: self._profiles.find_by_email(email), self._apply)

    async def save(self) -> UserProfile:
        """Create the profile, or overwrite the cached one wholesale.

        Store errors propagate to the caller.
        """
        profile = UserProfile(
            id=self.profile_id,
            email=self.email,
            display_name=self.display_name,
            avatar_url=self.avatar_url,
        )
        self.state = ViewState.MUTATING

        try:
            if self.profile_id is None:
                saved = await self._profiles.create(profile)
                self.profile_id = saved.id
            else:
                saved = await self._profiles.replace(profile)
        except Exception:
            self.state = ViewState.MUTATION_FAILED
            raise

        self.state = ViewState.MUTATION_SUCCEEDED
        logger.info("profile_saved", email=saved.email, profile_id=saved.id)
        self._notifier.notify(
            Notification(
                kind="success",
                title="Changes Saved",
                message="Your profile has been updated 👋",
            )
        )
        self._navigator.navigate(Screen.LIST_USERS)
        return saved

    def _apply(self, matches: list[UserProfile]) -> None:
        if not matches:
            logger.info("profile_not_found", email=self.email)
            return
        # No uniqueness on email: the last match wins
        existing = matches[-1]
        self.profile_id = existing.id
        self.avatar_url = existing.avatar_url or ""
        self.display_name = existing.display_name or ""
