"""Unit tests for the post feed screen."""

import pytest

from core.exceptions import AuthenticationError
from domain.entities.view_state import Screen, ViewState
from domain.viewmodels.ports import StaticSession
from domain.viewmodels.post_feed import FeedMessages, PostFeedViewModel


@pytest.fixture
def feed(posts, session, navigator, no_retry) -> PostFeedViewModel:
    return PostFeedViewModel(
        posts=posts, session=session, navigator=navigator, read_policy=no_retry
    )


class TestPosterEmail:
    def test_defaults_to_the_caller(self, feed):
        assert feed.poster_email == "me@x.com"
        assert feed.can_compose is True

    def test_uses_the_given_poster(self, posts, session, navigator):
        feed = PostFeedViewModel(posts, session, navigator, poster_email="b@x.com")

        assert feed.poster_email == "b@x.com"
        assert feed.can_compose is False

    def test_own_email_as_poster_can_compose(self, posts, session, navigator):
        feed = PostFeedViewModel(posts, session, navigator, poster_email="me@x.com")

        assert feed.can_compose is True

    def test_requires_a_session_without_a_poster(self, posts, navigator):
        feed = PostFeedViewModel(posts, StaticSession(), navigator)

        with pytest.raises(AuthenticationError):
            _ = feed.poster_email


class TestOnFocus:
    async def test_shows_loading_before_the_first_load(self, feed):
        assert feed.status_message == "Loading...."
        assert feed.state == ViewState.IDLE

    async def test_queries_by_poster_email(self, posts, session, navigator, no_retry):
        feed = PostFeedViewModel(
            posts, session, navigator, poster_email="b@x.com", read_policy=no_retry
        )
        posts.get_by_author.return_value = []

        await feed.on_focus()

        posts.get_by_author.assert_awaited_once_with("b@x.com")

    async def test_hides_private_posts_and_orders_newest_first(self, feed, posts, make_post):
        posts.get_by_author.return_value = [
            make_post("old", minutes=0),
            make_post("secret", minutes=30, is_private=True),
            make_post("new", minutes=60),
            make_post("middle", minutes=10),
        ]

        await feed.on_focus()

        assert feed.state == ViewState.LOADED
        assert [item.post.title for item in feed.items] == ["new", "middle", "old"]
        assert feed.status_message is None
        assert feed.is_empty is False

    async def test_only_private_posts_shows_empty_message(self, feed, posts, make_post):
        posts.get_by_author.return_value = [make_post("secret", is_private=True)]

        await feed.on_focus()

        assert feed.items == []
        assert feed.is_empty is True
        assert feed.status_message == "No posts yet!"

    async def test_renders_labels_and_omits_missing_parts(self, feed, posts, make_post):
        posts.get_by_author.return_value = [
            make_post("pic", text=None, image_url="https://i/1.png")
        ]

        await feed.on_focus()

        item = feed.items[0]
        assert item.date_label == "03/07/2026"
        assert item.time_label == "09:05:03"
        assert item.text is None
        assert item.image_url == "https://i/1.png"

    async def test_failed_load_shows_error_status(self, posts, session, navigator, no_retry):
        feed = PostFeedViewModel(
            posts,
            session,
            navigator,
            messages=FeedMessages(failed="Feed down"),
            read_policy=no_retry,
        )
        posts.get_by_author.side_effect = TimeoutError("slow")

        assert await feed.on_focus() is False
        assert feed.state == ViewState.LOAD_FAILED
        assert feed.status_message == "Feed down"

    async def test_reload_after_failure_clears_error(self, feed, posts, make_post):
        posts.get_by_author.side_effect = TimeoutError("slow")
        await feed.on_focus()
        posts.get_by_author.side_effect = None
        posts.get_by_author.return_value = [make_post("back")]

        await feed.on_focus()

        assert feed.state == ViewState.LOADED
        assert feed.error is None
        assert feed.status_message is None


class TestOpenComposer:
    def test_navigates_to_add_post(self, feed, navigator):
        feed.open_composer()

        assert navigator.last is not None
        assert navigator.last.screen == Screen.ADD_POST
        assert navigator.last.params == {"poster": "me@x.com"}
