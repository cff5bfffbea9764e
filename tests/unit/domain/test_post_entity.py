"""Unit tests for the post entity and feed rules."""

from datetime import datetime, timezone

import pytest

from domain.entities.post import Post, generate_post_id, is_valid_post, visible_posts


def _post(title: str, created_at: datetime | None, is_private: bool = False) -> Post:
    return Post(title=title, author_email="me@x.com", created_at=created_at, is_private=is_private)


class TestIsValidPost:
    @pytest.mark.parametrize(
        ("title", "text", "image_url", "expected"),
        [
            ("T", "body", None, True),
            ("T", None, "https://i/1.png", True),
            ("T", "body", "https://i/1.png", True),
            ("T", "", "", False),
            ("", "body", "https://i/1.png", False),
            (None, "body", None, False),
        ],
    )
    def test_requires_title_and_text_or_image(self, title, text, image_url, expected):
        assert is_valid_post(title, text, image_url) is expected


class TestLabels:
    def test_formats_calendar_month_and_day(self):
        post = _post("p", datetime(2026, 12, 31, 23, 4, 5, tzinfo=timezone.utc))

        assert post.date_label() == "12/31/2026"
        assert post.time_label() == "23:04:05"

    def test_pads_single_digits(self):
        post = _post("p", datetime(2026, 1, 2, 3, 4, 5, tzinfo=timezone.utc))

        assert post.date_label() == "01/02/2026"
        assert post.time_label() == "03:04:05"

    def test_blank_until_timestamp_is_assigned(self):
        post = _post("p", None)

        assert post.date_label() == ""
        assert post.time_label() == ""


class TestVisiblePosts:
    def test_drops_private_posts(self):
        posts = [
            _post("public", datetime(2026, 1, 1, tzinfo=timezone.utc)),
            _post("private", datetime(2026, 1, 2, tzinfo=timezone.utc), is_private=True),
        ]

        assert [p.title for p in visible_posts(posts)] == ["public"]

    def test_orders_newest_first(self):
        posts = [
            _post("a", datetime(2026, 1, 1, tzinfo=timezone.utc)),
            _post("c", datetime(2026, 1, 3, tzinfo=timezone.utc)),
            _post("b", datetime(2026, 1, 2, tzinfo=timezone.utc)),
        ]

        assert [p.title for p in visible_posts(posts)] == ["c", "b", "a"]

    def test_equal_timestamps_keep_fetch_order(self):
        same = datetime(2026, 1, 1, tzinfo=timezone.utc)
        posts = [_post("first", same), _post("second", same)]

        assert [p.title for p in visible_posts(posts)] == ["first", "second"]

    def test_posts_without_timestamp_are_not_dropped(self):
        posts = [_post("pending", None), _post("stored", datetime(2026, 1, 1, tzinfo=timezone.utc))]

        assert {p.title for p in visible_posts(posts)} == {"pending", "stored"}

    def test_does_not_mutate_input(self):
        posts = [
            _post("a", datetime(2026, 1, 1, tzinfo=timezone.utc)),
            _post("b", datetime(2026, 1, 2, tzinfo=timezone.utc)),
        ]

        visible_posts(posts)

        assert [p.title for p in posts] == ["a", "b"]


def test_post_ids_are_unique():
    assert len({generate_post_id() for _ in range(100)}) == 100
