# tests/unit/posts/test_toc.py

from app.domains.posts.entities import HeadingEntry
from app.domains.posts.markup import MarkupPipeline
from app.domains.posts.toc import TableOfContents, extract_headings


class TestTableOfContents:
    def test_only_second_level_headings(self) -> None:
        html = (
            '<h1 id="title">Title</h1>'
            '<h2 id="first">First</h2>'
            '<h3 id="nested">Nested</h3>'
            '<h2 id="second">Second</h2>'
        )

        assert extract_headings(html) == [
            HeadingEntry(text="First", id="first"),
            HeadingEntry(text="Second", id="second"),
        ]

    def test_no_headings_gives_empty_sequence(self) -> None:
        toc = TableOfContents("<p>No headings here</p>")

        assert list(toc) == []
        assert len(toc) == 0
        assert not toc

    def test_empty_html(self) -> None:
        assert extract_headings("") == []

    def test_is_restartable(self) -> None:
        toc = TableOfContents('<h2 id="a">A</h2><h2 id="b">B</h2>')

        first = list(toc)
        second = list(toc)

        assert first == second
        assert len(first) == 2

    def test_skips_headings_without_id(self) -> None:
        assert extract_headings('<h2>Loose</h2><h2 id="kept">Kept</h2>') == [
            HeadingEntry(text="Kept", id="kept")
        ]

    def test_text_excludes_anchor_link(self) -> None:
        html = MarkupPipeline().render("## Section One\nSome text")

        assert extract_headings(html) == [HeadingEntry(text="Section One", id="section-one")]

    def test_identical_headings_get_distinct_entries(self) -> None:
        html = MarkupPipeline().render("## Overview\n\n## Overview\n")

        assert [entry.id for entry in TableOfContents(html)] == ["overview", "overview-1"]
