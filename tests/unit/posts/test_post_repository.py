# tests/unit/posts/test_post_repository.py

from pathlib import Path

import pytest

from app.infrastructure.repositories.post_repository import PostRepository


class TestPostRepository:
    @pytest.mark.asyncio
    async def test_get_by_slug_exact_match(self, content_dir: Path) -> None:
        repository = PostRepository(content_dir)

        post = await repository.get_by_slug("hello")

        assert post.title == "Hello"
        assert await repository.get_by_slug("hell") is None
        assert await repository.get_by_slug("HELLO") is None

    @pytest.mark.asyncio
    async def test_duplicate_slug_first_file_wins(self, tmp_path: Path, write_post) -> None:
        write_post(tmp_path, "b-second.md", "---\ntitle: Second\nslug: same\n---\n")
        write_post(tmp_path, "a-first.md", "---\ntitle: First\nslug: same\n---\n")
        repository = PostRepository(tmp_path)

        post = await repository.get_by_slug("same")
        posts = await repository.list_all()

        assert post.title == "First"
        assert [p.title for p in posts] == ["First"]

    @pytest.mark.asyncio
    async def test_slug_defaults_to_file_stem(self, tmp_path: Path, write_post) -> None:
        write_post(tmp_path, "no-front-matter.md", "## Heading\n")

        post = await PostRepository(tmp_path).get_by_slug("no-front-matter")

        assert post is not None
        assert post.metadata == {}

    @pytest.mark.asyncio
    async def test_ignores_non_markdown_files(self, tmp_path: Path, write_post) -> None:
        write_post(tmp_path, "notes.txt", "---\nslug: notes\n---\n")

        assert await PostRepository(tmp_path).list_all() == []

    @pytest.mark.asyncio
    async def test_missing_directory_is_empty(self, tmp_path: Path) -> None:
        repository = PostRepository(tmp_path / "missing")

        assert await repository.list_all() == []
        assert await repository.get_by_slug("hello") is None

    @pytest.mark.asyncio
    async def test_reads_files_on_every_call(self, tmp_path: Path, write_post) -> None:
        repository = PostRepository(tmp_path)
        assert await repository.get_by_slug("late") is None

        write_post(tmp_path, "late.md", "---\nslug: late\n---\n")

        assert await repository.get_by_slug("late") is not None
