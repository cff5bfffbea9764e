"""Common Pydantic schemas shared across the API."""

from typing import Any

from pydantic import BaseModel, Field

from domain.viewmodels.ports import RecordingNavigator, RecordingNotifier


class ErrorResponse(BaseModel):
    """Standardized error response."""

    error_code: str
    message: str
    details: Any | None = None


class NavigationResponse(BaseModel):
    """Screen the client should move to after this request."""

    screen: str
    params: dict[str, str] = Field(default_factory=dict)


class NotificationResponse(BaseModel):
    """Alert or toast the client should show."""

    kind: str
    title: str
    message: str | None = None


class ScreenEffects(BaseModel):
    """Navigation and notifications emitted while handling a request."""

    navigation: NavigationResponse | None = None
    notifications: list[NotificationResponse] = Field(default_factory=list)

    @classmethod
    def collect(
        cls,
        navigator: RecordingNavigator | None = None,
        notifier: RecordingNotifier | None = None,
        **fields: Any,
    ) -> Any:
        """Build ``cls`` from the recorded effects plus its own ``fields``."""
        last = navigator.last if navigator else None
        return cls(
            **fields,
            navigation=(
                NavigationResponse(screen=last.screen.value, params=last.params) if last else None
            ),
            notifications=[
                NotificationResponse(kind=n.kind, title=n.title, message=n.message)
                for n in (notifier.notifications if notifier else [])
            ],
        )
