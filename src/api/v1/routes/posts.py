"""Post feed and composer API routes."""

from fastapi import APIRouter, Depends, Query, Request, status

from api.dependencies.auth import CurrentUser
from api.v1.dependencies import (
    get_feed_messages,
    get_navigator,
    get_notifier,
    get_post_repository,
    get_read_policy,
)
from api.v1.schemas.common import ErrorResponse
from api.v1.schemas.post import (
    FeedItemResponse,
    FeedResponse,
    PostCreate,
    PostDetailResponse,
    PostResponse,
)
from core.exceptions import FeedUnavailableError, PostValidationError
from core.rate_limit import READ_LIMIT, WRITE_LIMIT, limiter
from core.retry import ReadPolicy
from domain.entities.view_state import ViewState
from domain.repositories.post_repository import IPostRepository
from domain.viewmodels.post_composer import PostComposerViewModel
from domain.viewmodels.post_feed import FeedMessages, PostFeedViewModel
from domain.viewmodels.ports import RecordingNavigator, RecordingNotifier

router = APIRouter(prefix="/posts", tags=["posts"])


@router.get(
    "",
    response_model=FeedResponse,
    summary="List a user's public posts",
    responses={
        200: {"description": "Public posts, newest first"},
        503: {"model": ErrorResponse, "description": "The feed could not be loaded"},
    },
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def list_posts(
    request: Request,
    user: CurrentUser,
    posts: IPostRepository = Depends(get_post_repository),
    messages: FeedMessages = Depends(get_feed_messages),
    read_policy: ReadPolicy = Depends(get_read_policy),
    navigator: RecordingNavigator = Depends(get_navigator),
    poster: str | None = Query(None, description="Email whose posts to show (default: caller)"),
) -> FeedResponse:
    """
    Get the public posts of ``poster`` ordered by creation time, newest first.

    Private posts never appear, not even on the author's own feed. When there
    is nothing to show, ``status_message`` carries the "no posts" text.
    """
    feed = PostFeedViewModel(
        posts=posts,
        session=user,
        navigator=navigator,
        poster_email=poster,
        messages=messages,
        read_policy=read_policy,
    )
    await feed.on_focus()
    if feed.state == ViewState.LOAD_FAILED:
        raise FeedUnavailableError(feed.status_message or messages.failed)

    return FeedResponse(
        data=[
            FeedItemResponse(
                id=item.post.id,
                title=item.post.title,
                date=item.date_label,
                time=item.time_label,
                image_url=item.image_url,
                text=item.text,
            )
            for item in feed.items
        ],
        poster=feed.poster_email,
        can_compose=feed.can_compose,
        status_message=feed.status_message,
    )


@router.post(
    "",
    response_model=PostDetailResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Publish a post",
    responses={
        201: {"description": "Post stored"},
        400: {
            "model": ErrorResponse,
            "description": "Title missing, or neither text nor image given",
        },
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def create_post(
    request: Request,
    body: PostCreate,
    user: CurrentUser,
    posts: IPostRepository = Depends(get_post_repository),
    navigator: RecordingNavigator = Depends(get_navigator),
    notifier: RecordingNotifier = Depends(get_notifier),
) -> PostDetailResponse:
    """
    Publish a public or private post for the caller.

    The write is awaited before responding, so a 201 means the post is stored.
    """
    composer = PostComposerViewModel(
        posts=posts,
        session=user,
        navigator=navigator,
        notifier=notifier,
    )
    composer.title = body.title
    composer.text = body.text
    composer.image_url = body.image_url

    write = composer.submit(is_private=body.is_private)
    if write is None:
        raise PostValidationError(composer.error or "Please fill all required fields")
    created = await write

    return PostDetailResponse.collect(  # type: ignore[no-any-return]
        navigator,
        notifier,
        data=PostResponse(
            id=created.id,
            post_id=created.post_id,
            title=created.title,
            text=created.text,
            image_url=created.image_url,
            author_email=created.author_email,
            created_at=created.created_at,
            is_private=created.is_private,
        ),
    )
