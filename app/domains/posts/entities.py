import math
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

WORDS_PER_MINUTE = 200
DATE_FORMATS = ("%Y-%m-%d", "%B %d, %Y", "%b %d, %Y", "%d %B %Y", "%d %b %Y", "%d/%m/%Y")


class Post:
    """Сущность поста блога"""

    def __init__(
        self,
        slug: str,
        title: str,
        body: str = "",
        description: str = "",
        date: str = "",
        author: str = "",
        image: str = "",
        read: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None,
        source_path: Optional[Path] = None
    ):
        self.slug = slug
        self.title = title
        self.body = body
        self.description = description
        self.date = date
        self.author = author
        self.image = image
        self.read = read or self.estimate_read_time()
        self.metadata = metadata or {}
        self.source_path = source_path

    def get_word_count(self) -> int:
        """Подсчет количества слов в теле поста"""
        if not self.body.strip():
            return 0
        return len(self.body.split())

    def estimate_read_time(self) -> str:
        """Оценка времени чтения поста"""
        minutes = max(1, math.ceil(self.get_word_count() / WORDS_PER_MINUTE))
        return f"{minutes} min read"

    def get_published_at(self) -> Optional[datetime]:
        """Дата публикации из метаданных, если её удаётся разобрать"""
        value = self.date.strip()
        if not value:
            return None
        try:
            return datetime.fromisoformat(value).replace(tzinfo=None)
        except ValueError:
            pass
        for date_format in DATE_FORMATS:
            try:
                return datetime.strptime(value, date_format)
            except ValueError:
                continue
        return None

    @classmethod
    def from_source(cls, metadata: Dict[str, Any], body: str, source_path: Path) -> "Post":
        """Создание поста из метаданных и тела markdown-файла"""
        def text(key: str, default: str = "") -> str:
            value = metadata.get(key)
            return value if isinstance(value, str) else default

        slug = text("slug").strip() or source_path.stem
        return cls(
            slug=slug,
            title=text("title") or slug,
            body=body,
            description=text("description"),
            date=text("date"),
            author=text("author"),
            image=text("image"),
            read=text("read") or None,
            metadata=metadata,
            source_path=source_path
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, Post):
            return False
        return self.slug == other.slug

    def __repr__(self) -> str:
        return f"Post(slug={self.slug}, title={self.title})"


@dataclass(frozen=True)
class HeadingEntry:
    """Пункт оглавления: текст заголовка и его якорь"""
    text: str
    id: str


@dataclass
class RenderedPost:
    """Результат рендера поста для одного запроса"""
    post: Post
    html: str
    headings: List[HeadingEntry]
