# tests/unit/posts/test_entities.py

from datetime import datetime
from pathlib import Path

from app.domains.posts.entities import Post


class TestPost:
    def test_read_time_from_metadata(self) -> None:
        post = Post(slug="a", title="A", body="word " * 1000, read="6 min read")

        assert post.read == "6 min read"

    def test_read_time_is_estimated(self) -> None:
        post = Post(slug="a", title="A", body="word " * 450)

        assert post.read == "3 min read"

    def test_read_time_minimum_is_one_minute(self) -> None:
        assert Post(slug="a", title="A").read == "1 min read"

    def test_word_count(self) -> None:
        assert Post(slug="a", title="A", body="one two  three\n").get_word_count() == 3
        assert Post(slug="a", title="A", body="   ").get_word_count() == 0

    def test_published_at_parses_common_formats(self) -> None:
        assert Post(slug="a", title="A", date="2024-11-29").get_published_at() == datetime(2024, 11, 29)
        assert Post(slug="a", title="A", date="Nov 29, 2024").get_published_at() == datetime(2024, 11, 29)
        assert Post(slug="a", title="A", date="someday").get_published_at() is None
        assert Post(slug="a", title="A").get_published_at() is None


class TestPostFromSource:
    def test_uses_metadata(self) -> None:
        metadata = {
            "title": "Hello",
            "slug": "hello",
            "description": "First",
            "date": "2024-11-29",
            "author": "Irbaz",
            "image": "/cover.png",
            "read": "2 min read",
        }

        post = Post.from_source(metadata, "body", Path("content/other-name.md"))

        assert post.slug == "hello"
        assert post.title == "Hello"
        assert post.author == "Irbaz"
        assert post.image == "/cover.png"
        assert post.read == "2 min read"
        assert post.metadata is metadata

    def test_slug_and_title_fall_back_to_filename(self) -> None:
        post = Post.from_source({}, "body", Path("content/my-post.md"))

        assert post.slug == "my-post"
        assert post.title == "my-post"

    def test_non_string_values_are_ignored(self) -> None:
        post = Post.from_source({"title": ["not", "a", "string"]}, "", Path("x.md"))

        assert post.title == "x"
