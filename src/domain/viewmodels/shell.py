"""Navigation shell: picks the flow the session signal allows."""

from dataclasses import dataclass
from enum import StrEnum

from domain.entities.view_state import Screen
from domain.viewmodels.ports import ISessionSignal


class Flow(StrEnum):
    UNAUTHENTICATED = "unauthenticated"
    AUTHENTICATED = "authenticated"


@dataclass(frozen=True, slots=True)
class ScreenSpec:
    screen: Screen
    title: str


UNAUTHENTICATED_SCREENS = (
    ScreenSpec(Screen.LOGIN, "Login"),
    ScreenSpec(Screen.SIGN_UP, "Sign Up"),
)

AUTHENTICATED_SCREENS = (
    ScreenSpec(Screen.LIST_USERS, "Posties"),
    ScreenSpec(Screen.POSTS_LIST, "Posts...."),
    ScreenSpec(Screen.ADD_POST, "Add!!!"),
    ScreenSpec(Screen.SETTINGS, "Settings"),
)


class NavigationShell:
    """Composes the screens of whichever flow is active."""

    def __init__(self, session: ISessionSignal) -> None:
        self._session = session

    @property
    def flow(self) -> Flow:
        if self._session.current_email():
            return Flow.AUTHENTICATED
        return Flow.UNAUTHENTICATED

    @property
    def screens(self) -> tuple[ScreenSpec, ...]:
        if self.flow is Flow.AUTHENTICATED:
            return AUTHENTICATED_SCREENS
        return UNAUTHENTICATED_SCREENS

    @property
    def initial_screen(self) -> Screen:
        return self.screens[0].screen

    def can_show(self, screen: Screen) -> bool:
        return any(entry.screen == screen for entry in self.screens)
