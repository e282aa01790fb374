from datetime import datetime
from typing import List

from pydantic import BaseModel, ConfigDict


class PostSummary(BaseModel):
    """Схема карточки поста в списке"""
    slug: str
    title: str
    description: str = ""
    date: str = ""
    author: str = ""
    image: str = ""
    read: str = ""

    model_config = ConfigDict(from_attributes=True)


class PostListResponse(BaseModel):
    """Схема для списка постов"""
    posts: List[PostSummary]
    total: int


class HeadingResponse(BaseModel):
    """Схема пункта оглавления"""
    text: str
    id: str

    model_config = ConfigDict(from_attributes=True)


class TableOfContentsResponse(BaseModel):
    """Схема оглавления поста"""
    slug: str
    headings: List[HeadingResponse]


class PostResponse(PostSummary):
    """Схема для ответа с отрендеренным постом"""
    html: str
    headings: List[HeadingResponse]
    word_count: int


class PostExportResponse(BaseModel):
    """Схема для ответа с экспортированным постом"""
    slug: str
    format: str
    filename: str
    content: str
    exported_at: datetime
