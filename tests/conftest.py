from pathlib import Path

import pytest

from app.core.config import Settings
from app.domains.posts.services import PostService

HELLO_POST = """---
title: "Hello"
slug: "hello"
description: First post
date: "2024-11-29"
author: Irbaz
---
## Section One
Some text
"""

OLDER_POST = """---
title: Older
slug: older
date: "2024-01-05"
author: Irbaz
---
Nothing to see here.
"""


def _write_post(directory: Path, filename: str, text: str) -> Path:
    path = directory / filename
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def write_post():
    """Writes a markdown file into a content directory."""
    return _write_post


@pytest.fixture
def content_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "content"
    directory.mkdir()
    _write_post(directory, "hello.md", HELLO_POST)
    _write_post(directory, "older.md", OLDER_POST)
    return directory


@pytest.fixture
def settings(content_dir: Path) -> Settings:
    return Settings(
        _env_file=None,
        content_dir=content_dir,
        email_user="blog@example.com",
        email_pass="app-password",
    )


@pytest.fixture
def post_service(settings: Settings) -> PostService:
    return PostService(settings)
