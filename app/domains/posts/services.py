from datetime import datetime, timezone
from typing import List, Optional

from starlette.concurrency import run_in_threadpool

from app.core.config import Settings, settings as default_settings
from app.domains.posts.entities import Post, RenderedPost
from app.domains.posts.markup import MarkupPipeline, PipelineOptions
from app.domains.posts.toc import TableOfContents
from app.infrastructure.repositories.post_repository import PostRepository


class PostService:
    """Сервис для работы с постами блога"""

    def __init__(self, settings: Optional[Settings] = None, repository: Optional[PostRepository] = None):
        self.settings = settings or default_settings
        self.post_repository = repository or PostRepository(self.settings.content_dir)

    async def get_post(self, slug: str) -> Optional[Post]:
        """Получение поста по slug"""
        return await self.post_repository.get_by_slug(slug)

    async def list_posts(self) -> List[Post]:
        """Получение списка постов, новые первыми"""
        posts = await self.post_repository.list_all()
        posts.sort(key=lambda post: post.slug)
        posts.sort(key=lambda post: post.get_published_at() or datetime.min, reverse=True)
        return posts

    async def render_post(self, slug: str, standalone: bool = False) -> Optional[RenderedPost]:
        """Рендер поста; None если пост не найден"""
        post = await self.get_post(slug)

        if not post:
            return None

        if standalone:
            options = PipelineOptions(standalone=True, document_title=post.title)
        else:
            options = PipelineOptions()
        html = await run_in_threadpool(MarkupPipeline(options).render, post.body)

        return RenderedPost(post=post, html=html, headings=list(TableOfContents(html)))

    async def export_post(self, slug: str) -> Optional[dict]:
        """Экспорт поста в самостоятельный HTML-документ"""
        rendered = await self.render_post(slug, standalone=True)

        if not rendered:
            return None

        return {
            "slug": rendered.post.slug,
            "format": "html",
            "filename": f"{rendered.post.slug}.html",
            "content": rendered.html,
            "exported_at": datetime.now(timezone.utc)
        }
