import logging
from pathlib import Path
from typing import Dict, List, Optional

from starlette.concurrency import run_in_threadpool

from app.domains.posts.entities import Post
from app.domains.posts.frontmatter import parse_front_matter

logger = logging.getLogger(__name__)

POST_SUFFIXES = (".md", ".markdown")


class PostRepository:
    """Репозиторий постов поверх каталога с markdown-файлами.

    Файлы читаются заново при каждом обращении. Если несколько файлов
    объявляют один и тот же slug, побеждает первый в порядке имён файлов.
    """

    def __init__(self, content_dir: Path):
        self.content_dir = Path(content_dir)

    async def get_by_slug(self, slug: str) -> Optional[Post]:
        """Получение поста по slug"""
        return await run_in_threadpool(self._find, slug)

    async def list_all(self) -> List[Post]:
        """Получение всех постов каталога"""
        return await run_in_threadpool(self._index)

    def _paths(self) -> List[Path]:
        if not self.content_dir.is_dir():
            logger.warning(f"Content directory {self.content_dir} does not exist")
            return []
        return sorted(
            path for path in self.content_dir.iterdir()
            if path.is_file() and path.suffix.lower() in POST_SUFFIXES
        )

    def _load(self, path: Path) -> Optional[Post]:
        try:
            raw = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Could not read post file {path}: {e}")
            return None
        metadata, body = parse_front_matter(raw)
        return Post.from_source(metadata, body, path)

    def _index(self) -> List[Post]:
        posts: Dict[str, Post] = {}
        for path in self._paths():
            post = self._load(path)
            if post is None:
                continue
            if post.slug in posts:
                logger.warning(
                    f"Duplicate slug '{post.slug}' in {path.name}, "
                    f"keeping {posts[post.slug].source_path.name}"
                )
                continue
            posts[post.slug] = post
        return list(posts.values())

    def _find(self, slug: str) -> Optional[Post]:
        for path in self._paths():
            post = self._load(path)
            if post is not None and post.slug == slug:
                return post
        return None
