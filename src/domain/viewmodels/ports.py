"""Collaborators every screen receives: session signal, navigator, notifier."""

from dataclasses import dataclass, field
from typing import Protocol

from domain.entities.view_state import Screen


class ISessionSignal(Protocol):
    """Who, if anyone, is signed in."""

    def current_email(self) -> str | None:
        """Email of the signed-in user, or None."""
        ...


class INavigator(Protocol):
    """Routing seam: the only way a screen leaves itself."""

    def navigate(self, screen: Screen, **params: str) -> None:
        """Ask the shell to show ``screen`` with ``params``."""
        ...


@dataclass(frozen=True, slots=True)
class Notification:
    """A user-facing alert or toast."""

    kind: str
    title: str
    message: str | None = None


class INotifier(Protocol):
    """Surfaces alerts and toasts to the user."""

    def notify(self, notification: Notification) -> None:
        ...


@dataclass(frozen=True, slots=True)
class StaticSession:
    """Session signal with a fixed answer."""

    email: str | None = None

    def current_email(self) -> str | None:
        return self.email


@dataclass(frozen=True, slots=True)
class NavigationRequest:
    screen: Screen
    params: dict[str, str]


@dataclass
class RecordingNavigator:
    """Navigator that keeps every request so a caller can relay it."""

    requests: list[NavigationRequest] = field(default_factory=list)

    def navigate(self, screen: Screen, **params: str) -> None:
        self.requests.append(NavigationRequest(screen=screen, params=dict(params)))

    @property
    def last(self) -> NavigationRequest | None:
        return self.requests[-1] if self.requests else None


@dataclass
class RecordingNotifier:
    """Notifier that collects notifications in emission order."""

    notifications: list[Notification] = field(default_factory=list)

    def notify(self, notification: Notification) -> None:
        self.notifications.append(notification)
