from app.domains.posts.entities import Post, HeadingEntry, RenderedPost
from app.domains.posts.schemas import (
    PostSummary, PostListResponse, HeadingResponse, TableOfContentsResponse,
    PostResponse, PostExportResponse
)

__all__ = [
    "Post", "HeadingEntry", "RenderedPost",
    "PostSummary", "PostListResponse", "HeadingResponse", "TableOfContentsResponse",
    "PostResponse", "PostExportResponse"
]
