from typing import Iterator, List

from bs4 import BeautifulSoup

from app.domains.posts.entities import HeadingEntry

TOC_HEADING = "h2"


class TableOfContents:
    """Оглавление отрендеренного поста.

    Содержит только заголовки второго уровня: h1 занят названием поста,
    более глубокие уровни в оглавление не попадают. HTML разбирается при
    первом обходе, каждый новый обход начинается с начала документа.
    """

    def __init__(self, html: str):
        self.html = html
        self._soup = None

    def _headings(self):
        if self._soup is None:
            self._soup = BeautifulSoup(self.html or "", "html.parser")
        return self._soup.find_all(TOC_HEADING, id=True)

    def __iter__(self) -> Iterator[HeadingEntry]:
        for heading in self._headings():
            yield HeadingEntry(text=heading.get_text().strip(), id=heading["id"])

    def __len__(self) -> int:
        return len(self._headings())

    def __bool__(self) -> bool:
        return len(self) > 0

    def __repr__(self) -> str:
        return f"TableOfContents(entries={len(self)})"


def extract_headings(html: str) -> List[HeadingEntry]:
    """Список пунктов оглавления для фрагмента HTML"""
    return list(TableOfContents(html))
