"""Post composer screen."""

import asyncio

import structlog

from domain.entities.post import Post, is_valid_post
from domain.entities.view_state import Screen, ViewState
from domain.repositories.post_repository import IPostRepository
from domain.viewmodels.base import ViewModel
from domain.viewmodels.ports import INavigator, INotifier, ISessionSignal, Notification

logger = structlog.get_logger()

MISSING_FIELDS_MESSAGE = "Please fill all required fields"
UPLOADED_MESSAGE = "Uploaded Successfully!"


class PostComposerViewModel(ViewModel):
    """Collects a title, text and image URL and publishes them as a post.

    Submitting navigates back to the caller's feed straight away and returns
    the write as a task; whoever holds the task decides whether to await it.
    """

    screen_name = "post_composer"

    def __init__(
        self,
        posts: IPostRepository,
        session: ISessionSignal,
        navigator: INavigator,
        notifier: INotifier,
    ) -> None:
        super().__init__(session)
        self._posts = posts
        self._navigator = navigator
        self._notifier = notifier
        self.title = ""
        self.text = ""
        self.image_url = ""

    def submit_public(self) -> "asyncio.Task[Post] | None":
        return self.submit(is_private=False)

    def submit_private(self) -> "asyncio.Task[Post] | None":
        return self.submit(is_private=True)

    def submit(self, *, is_private: bool) -> "asyncio.Task[Post] | None":
        """Validate and start the write. Returns None when the form is rejected."""
        if not is_valid_post(self.title, self.text, self.image_url):
            self.error = MISSING_FIELDS_MESSAGE
            self._notifier.notify(Notification(kind="error", title=MISSING_FIELDS_MESSAGE))
            return None

        author_email = self._require_email()
        post = Post(
            title=self.title,
            author_email=author_email,
            text=self.text or None,
            image_url=self.image_url or None,
            is_private=is_private,
        )

        self.error = None
        self.state = ViewState.MUTATING
        self._navigator.navigate(Screen.POSTS_LIST, poster=author_email)
        return asyncio.create_task(self._persist(post))

    async def _persist(self, post: Post) -> Post:
        try:
            created = await self._posts.create(post)
        except Exception as exc:
            self.state = ViewState.MUTATION_FAILED
            self.error = str(exc)
            logger.error(
                "post_write_failed",
                post_id=post.post_id,
                author_email=post.author_email,
                error=str(exc),
            )
            raise

        self.state = ViewState.MUTATION_SUCCEEDED
        logger.info(
            "post_created",
            post_id=created.post_id,
            author_email=created.author_email,
            is_private=created.is_private,
        )
        self._notifier.notify(Notification(kind="success", title=UPLOADED_MESSAGE))
        return created
