"""Shared fixtures for unit tests."""

from collections.abc import Callable
from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock

import pytest

from core.retry import ReadPolicy
from domain.entities.post import Post
from domain.entities.profile import UserProfile
from domain.viewmodels.ports import RecordingNavigator, RecordingNotifier, StaticSession

ME = "me@x.com"


@pytest.fixture
def session() -> StaticSession:
    return StaticSession(ME)


@pytest.fixture
def signed_out() -> StaticSession:
    return StaticSession()


@pytest.fixture
def navigator() -> RecordingNavigator:
    return RecordingNavigator()


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def no_retry() -> ReadPolicy:
    return ReadPolicy(attempts=1, delay_seconds=0)


@pytest.fixture
def fast_retry() -> ReadPolicy:
    return ReadPolicy(attempts=2, delay_seconds=0)


@pytest.fixture
def profiles() -> AsyncMock:
    """Profile repository mock; every method is an AsyncMock."""
    return AsyncMock()


@pytest.fixture
def posts() -> AsyncMock:
    """Post repository mock; every method is an AsyncMock."""
    return AsyncMock()


@pytest.fixture
def accounts() -> AsyncMock:
    """Account repository mock; every method is an AsyncMock."""
    return AsyncMock()


# --- Builders ---

BASE_TIME = datetime(2026, 3, 7, 9, 5, 3, tzinfo=timezone.utc)


def _profile(email: str, **kwargs: object) -> UserProfile:
    kwargs.setdefault("id", f"doc-{email}")
    return UserProfile(email=email, **kwargs)  # type: ignore[arg-type]


def _post(
    title: str,
    *,
    author_email: str = ME,
    minutes: int = 0,
    is_private: bool = False,
    **kwargs: object,
) -> Post:
    """A post created ``minutes`` after BASE_TIME."""
    kwargs.setdefault("created_at", BASE_TIME + timedelta(minutes=minutes))
    kwargs.setdefault("text", f"{title} body")
    return Post(
        title=title,
        author_email=author_email,
        is_private=is_private,
        id=f"doc-{title}",
        **kwargs,  # type: ignore[arg-type]
    )


@pytest.fixture
def make_profile() -> Callable[..., UserProfile]:
    return _profile


@pytest.fixture
def make_post() -> Callable[..., Post]:
    return _post
