"""Profile directory API routes."""

from fastapi import APIRouter, Depends, Request

from api.dependencies.auth import CurrentUser
from api.v1.dependencies import get_navigator, get_profile_repository, get_read_policy
from api.v1.schemas.common import ErrorResponse
from api.v1.schemas.profile import DirectoryEntryResponse, DirectoryResponse
from core.config import settings
from core.exceptions import DirectoryUnavailableError
from core.rate_limit import READ_LIMIT, limiter
from core.retry import ReadPolicy
from domain.entities.view_state import ViewState
from domain.repositories.profile_repository import IProfileRepository
from domain.viewmodels.ports import RecordingNavigator
from domain.viewmodels.profile_directory import ProfileDirectoryViewModel

router = APIRouter(prefix="/users", tags=["users"])


@router.get(
    "",
    response_model=DirectoryResponse,
    summary="List all users",
    responses={
        200: {"description": "Profiles with the caller first"},
        503: {"model": ErrorResponse, "description": "The directory could not be loaded"},
    },
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def list_users(
    request: Request,
    user: CurrentUser,
    profiles: IProfileRepository = Depends(get_profile_repository),
    read_policy: ReadPolicy = Depends(get_read_policy),
    navigator: RecordingNavigator = Depends(get_navigator),
) -> DirectoryResponse:
    """
    Get every profile, the caller's own first and the rest in store order.

    Missing names fall back to the email, missing avatars to a placeholder.
    """
    directory = ProfileDirectoryViewModel(
        profiles=profiles,
        session=user,
        navigator=navigator,
        default_avatar_url=settings.default_avatar_url,
        read_policy=read_policy,
    )
    await directory.on_focus()
    if directory.state == ViewState.LOAD_FAILED:
        raise DirectoryUnavailableError()

    return DirectoryResponse(
        data=[
            DirectoryEntryResponse(
                id=entry.profile.id,
                email=entry.profile.email,
                name=entry.name,
                avatar_url=entry.avatar_url,
                is_current_user=entry.is_current_user,
            )
            for entry in directory.entries
        ],
        meta={"total": len(directory.entries)},
    )
