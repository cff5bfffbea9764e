"""Post feed screen: one user's public posts, newest first."""

from dataclasses import dataclass

from core.retry import ReadPolicy
from domain.entities.post import Post, visible_posts
from domain.entities.view_state import Screen, ViewState
from domain.repositories.post_repository import IPostRepository
from domain.viewmodels.base import ViewModel
from domain.viewmodels.ports import INavigator, ISessionSignal


@dataclass(frozen=True)
class FeedMessages:
    """Status texts the feed can show in place of its list."""

    loading: str = "Loading...."
    empty: str = "No posts yet!"
    failed: str = "Unable to fetch posts"


@dataclass(frozen=True, slots=True)
class FeedItem:
    """A rendered post: labels precomputed, optional parts left as None."""

    post: Post
    date_label: str
    time_label: str
    image_url: str | None
    text: str | None

    @classmethod
    def from_post(cls, post: Post) -> "FeedItem":
        return cls(
            post=post,
            date_label=post.date_label(),
            time_label=post.time_label(),
            image_url=post.image_url or None,
            text=post.text or None,
        )


class PostFeedViewModel(ViewModel):
    """Loads the public posts of ``poster_email`` (the caller by default)."""

    screen_name = "post_feed"

    def __init__(
        self,
        posts: IPostRepository,
        session: ISessionSignal,
        navigator: INavigator,
        poster_email: str | None = None,
        messages: FeedMessages | None = None,
        read_policy: ReadPolicy | None = None,
    ) -> None:
        super().__init__(session, read_policy)
        self._posts = posts
        self._navigator = navigator
        self._poster_email = poster_email
        self.messages = messages or FeedMessages()
        self.items: list[FeedItem] = []
        self.status_message: str | None = self.messages.loading

    @property
    def poster_email(self) -> str:
        if self._poster_email:
            return self._poster_email
        return self._require_email()

    @property
    def can_compose(self) -> bool:
        """The composer is offered only on the caller's own feed."""
        return self.poster_email == self._session.current_email()

    @property
    def is_empty(self) -> bool:
        return self.state == ViewState.LOADED and not self.items

    async def on_focus(self) -> bool:
        """Refetch the feed; a single equality query on the author email."""
        poster = self.poster_email
        loaded = await self._load(lambda: self._posts.get_by_author(poster), self._apply)
        if self.state == ViewState.LOAD_FAILED:
            self.status_message = self.messages.failed
        return loaded

    def open_composer(self) -> None:
        self._navigator.navigate(Screen.ADD_POST, poster=self._require_email())

    def _apply(self, posts: list[Post]) -> None:
        self.items = [FeedItem.from_post(post) for post in visible_posts(posts)]
        self.status_message = None if self.items else self.messages.empty
