from fastapi import APIRouter, Depends, HTTPException, status

from app.api.deps import get_post_service
from app.domains.posts.entities import RenderedPost
from app.domains.posts.schemas import (
    PostSummary, PostListResponse, HeadingResponse, TableOfContentsResponse,
    PostResponse, PostExportResponse
)
from app.domains.posts.services import PostService

router = APIRouter(prefix="/api/posts", tags=["posts"])


def _post_response(rendered: RenderedPost) -> PostResponse:
    post = rendered.post
    return PostResponse(
        slug=post.slug,
        title=post.title,
        description=post.description,
        date=post.date,
        author=post.author,
        image=post.image,
        read=post.read,
        html=rendered.html,
        headings=[HeadingResponse.model_validate(h) for h in rendered.headings],
        word_count=post.get_word_count()
    )


@router.get("/", response_model=PostListResponse)
async def list_posts(post_service: PostService = Depends(get_post_service)):
    """Получение списка постов"""
    posts = await post_service.list_posts()

    return PostListResponse(
        posts=[PostSummary.model_validate(post) for post in posts],
        total=len(posts)
    )


@router.get("/{slug}", response_model=PostResponse)
async def get_post(slug: str, post_service: PostService = Depends(get_post_service)):
    """Получение отрендеренного поста по slug"""
    rendered = await post_service.render_post(slug)

    if not rendered:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Post not found"
        )

    return _post_response(rendered)


@router.get("/{slug}/toc", response_model=TableOfContentsResponse)
async def get_post_toc(slug: str, post_service: PostService = Depends(get_post_service)):
    """Получение оглавления поста"""
    rendered = await post_service.render_post(slug)

    if not rendered:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Post not found"
        )

    return TableOfContentsResponse(
        slug=rendered.post.slug,
        headings=[HeadingResponse.model_validate(h) for h in rendered.headings]
    )


@router.get("/{slug}/export", response_model=PostExportResponse)
async def export_post(slug: str, post_service: PostService = Depends(get_post_service)):
    """Экспорт поста в самостоятельный HTML-документ"""
    export_data = await post_service.export_post(slug)

    if not export_data:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Post not found"
        )

    return PostExportResponse(**export_data)
