"""Profile settings API routes."""

from fastapi import APIRouter, Depends, Request

from api.dependencies.auth import CurrentUser
from api.v1.dependencies import (
    get_navigator,
    get_notifier,
    get_profile_repository,
    get_read_policy,
)
from api.v1.schemas.common import ErrorResponse
from api.v1.schemas.profile import (
    ProfileSettings,
    ProfileSettingsResponse,
    ProfileSettingsUpdate,
)
from core.exceptions import ProfileUnavailableError
from core.rate_limit import READ_LIMIT, WRITE_LIMIT, limiter
from core.retry import ReadPolicy
from domain.entities.view_state import ViewState
from domain.repositories.profile_repository import IProfileRepository
from domain.viewmodels.ports import RecordingNavigator, RecordingNotifier
from domain.viewmodels.profile_editor import ProfileEditorViewModel

router = APIRouter(prefix="/settings", tags=["settings"])


def _to_settings(editor: ProfileEditorViewModel) -> ProfileSettings:
    return ProfileSettings(
        profile_id=editor.profile_id,
        email=editor.email,
        display_name=editor.display_name,
        avatar_url=editor.avatar_url,
    )


@router.get(
    "/profile",
    response_model=ProfileSettingsResponse,
    summary="Load the caller's profile",
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_profile_settings(
    request: Request,
    user: CurrentUser,
    profiles: IProfileRepository = Depends(get_profile_repository),
    read_policy: ReadPolicy = Depends(get_read_policy),
    navigator: RecordingNavigator = Depends(get_navigator),
    notifier: RecordingNotifier = Depends(get_notifier),
) -> ProfileSettingsResponse:
    """Get the caller's display name and avatar; blank when no profile exists yet."""
    editor = ProfileEditorViewModel(profiles, user, navigator, notifier, read_policy)
    await editor.on_activate()
    if editor.state == ViewState.LOAD_FAILED:
        raise ProfileUnavailableError()

    return ProfileSettingsResponse.collect(  # type: ignore[no-any-return]
        navigator, notifier, data=_to_settings(editor)
    )


@router.put(
    "/profile",
    response_model=ProfileSettingsResponse,
    summary="Save the caller's profile",
    responses={
        200: {"description": "Profile created or overwritten"},
        503: {"model": ErrorResponse, "description": "The existing profile could not be loaded"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def save_profile_settings(
    request: Request,
    body: ProfileSettingsUpdate,
    user: CurrentUser,
    profiles: IProfileRepository = Depends(get_profile_repository),
    read_policy: ReadPolicy = Depends(get_read_policy),
    navigator: RecordingNavigator = Depends(get_navigator),
    notifier: RecordingNotifier = Depends(get_notifier),
) -> ProfileSettingsResponse:
    """
    Save display name and avatar URL.

    Creates the profile when the caller has none, otherwise replaces the whole
    document with ``email``, ``displayName`` and ``avatar``.
    """
    editor = ProfileEditorViewModel(profiles, user, navigator, notifier, read_policy)
    await editor.on_activate()
    # Saving after a failed load would create a duplicate profile
    if editor.state == ViewState.LOAD_FAILED:
        raise ProfileUnavailableError()

    editor.display_name = body.display_name
    editor.avatar_url = body.avatar_url
    await editor.save()

    return ProfileSettingsResponse.collect(  # type: ignore[no-any-return]
        navigator, notifier, data=_to_settings(editor)
    )
