"""Конвейер преобразования markdown в HTML.

Этапы выполняются строго по порядку::

    parse -> convert -> wrap_document -> assign_heading_ids
          -> autolink_headings -> highlight_code -> format -> serialize

Каждый этап после ``convert`` принимает дерево BeautifulSoup и возвращает
новое дерево, не изменяя входное.
"""
import copy
import logging
import re
import unicodedata
from dataclasses import dataclass
from functools import partial
from html import escape
from typing import Any, Callable, Dict, List, Optional, Tuple

import mistune
from bs4 import BeautifulSoup
from bs4.element import NavigableString, PreformattedString
from mistune.core import BlockState
from pygments import highlight
from pygments.formatters import HtmlFormatter
from pygments.lexers import get_lexer_by_name
from pygments.util import ClassNotFound

logger = logging.getLogger(__name__)

HTML_PARSER = "html.parser"
MARKDOWN_PLUGINS = ["strikethrough", "table", "url"]
HEADING_TAGS = ["h1", "h2", "h3", "h4", "h5", "h6"]
LINE_NUMBER_FLAGS = {"showlinenumbers", "linenos", "linenumbers"}
# Контейнеры, внутри которых форматирование переставляет переводы строк
BLOCK_CONTAINERS = [
    "html", "head", "body", "div", "section", "article", "figure",
    "blockquote", "ul", "ol", "table", "thead", "tbody", "tfoot", "tr",
]

DOCUMENT_TEMPLATE = (
    "<!DOCTYPE html>"
    '<html lang="en">'
    "<head>"
    '<meta charset="utf-8">'
    "<title>{title}</title>"
    '<meta name="viewport" content="width=device-width, initial-scale=1">'
    "</head>"
    "<body></body>"
    "</html>"
)

Tree = BeautifulSoup
Stage = Callable[[Tree], Tree]


@dataclass(frozen=True)
class PipelineOptions:
    """Настройки конвейера рендера"""
    standalone: bool = False
    document_title: str = "👋🌍"
    autolink: bool = True
    copy_button: bool = True
    copy_visibility: str = "always"
    feedback_duration: int = 3000


def split_fence_info(info: Optional[str]) -> Tuple[str, List[str]]:
    """Разбор строки после ``` на язык и флаги"""
    parts = (info or "").split()
    if not parts:
        return "", []
    return parts[0], parts[1:]


class PostRenderer(mistune.HTMLRenderer):
    """HTML-рендерер mistune, сохраняющий язык и флаги блоков кода"""

    def block_code(self, code: str, info: Optional[str] = None) -> str:
        language, flags = split_fence_info(info)
        pre_attrs = ""
        code_attrs = ""
        if language:
            pre_attrs += f' data-language="{escape(language)}"'
            code_attrs = f' class="language-{escape(language)}"'
        if any(flag.lower() in LINE_NUMBER_FLAGS for flag in flags):
            pre_attrs += " data-line-numbers"
        return f"<pre{pre_attrs}><code{code_attrs}>{escape(code, quote=False)}</code></pre>\n"


_ast_markdown = mistune.create_markdown(renderer=None, plugins=MARKDOWN_PLUGINS)
_html_markdown = mistune.create_markdown(renderer=PostRenderer(), plugins=MARKDOWN_PLUGINS)


def _copy(tree: Tree) -> Tree:
    # копия узлов без повторного разбора HTML
    result = BeautifulSoup("", HTML_PARSER)
    for node in tree.contents:
        result.append(copy.copy(node))
    return result


def _fragment(html: str) -> Tree:
    return BeautifulSoup(html, HTML_PARSER)


def parse_markdown(body: str) -> List[Dict[str, Any]]:
    """Разбор markdown в структурное дерево токенов"""
    return _ast_markdown(body)


def convert_to_html(tokens: List[Dict[str, Any]]) -> Tree:
    """Преобразование дерева токенов в HTML-дерево"""
    html = _html_markdown.renderer(copy.deepcopy(tokens), BlockState())
    return _fragment(html)


def wrap_document(tree: Tree, title: str) -> Tree:
    """Оборачивание фрагмента в минимальный HTML-документ"""
    document = _fragment(DOCUMENT_TEMPLATE.format(title=escape(title)))
    fragment = _copy(tree)
    for node in list(fragment.contents):
        document.body.append(node.extract())
    return document


def slugify_heading(text: str) -> str:
    """Преобразование текста заголовка в URL-безопасный якорь"""
    normalized = unicodedata.normalize("NFKD", text).encode("ascii", "ignore").decode("ascii")
    slug = re.sub(r"[^a-z0-9]+", "-", normalized.lower()).strip("-")
    return slug or "section"


def assign_heading_ids(tree: Tree) -> Tree:
    """Присвоение уникального id каждому заголовку"""
    result = _copy(tree)
    taken = {tag["id"] for tag in result.find_all(id=True)}

    for heading in result.find_all(HEADING_TAGS):
        if heading.get("id"):
            continue
        base = slugify_heading(heading.get_text())
        candidate = base
        suffix = 0
        while candidate in taken:
            suffix += 1
            candidate = f"{base}-{suffix}"
        heading["id"] = candidate
        taken.add(candidate)

    return result


def autolink_headings(tree: Tree) -> Tree:
    """Добавление ссылки на себя в каждый заголовок с id"""
    result = _copy(tree)
    for heading in result.find_all(HEADING_TAGS, id=True):
        anchor = result.new_tag("a", attrs={
            "class": "heading-anchor",
            "href": f"#{heading['id']}",
            "aria-hidden": "true",
            "tabindex": "-1",
        })
        anchor.append(result.new_tag("span", attrs={"class": "icon icon-link"}))
        heading.insert(0, anchor)
    return result


def _lexer_for(language: str):
    if not language:
        return None
    try:
        return get_lexer_by_name(language)
    except ClassNotFound:
        logger.debug(f"No lexer for language '{language}', leaving block unhighlighted")
        return None


def highlight_code(
    tree: Tree,
    copy_button: bool = True,
    copy_visibility: str = "always",
    feedback_duration: int = 3000
) -> Tree:
    """Подсветка синтаксиса в блоках кода и кнопка копирования"""
    result = _copy(tree)

    for pre in result.find_all("pre"):
        code = pre.find("code")
        if code is None:
            continue

        source = code.get_text()
        language = pre.get("data-language", "")
        block = pre
        lexer = _lexer_for(language)

        if lexer is not None:
            formatter = HtmlFormatter(
                cssclass="highlight",
                linenos="inline" if pre.has_attr("data-line-numbers") else False,
            )
            highlighted = _fragment(highlight(source, lexer, formatter)).find("div")
            highlighted["data-language"] = language
            pre.replace_with(highlighted)
            block = highlighted

        if copy_button:
            figure = result.new_tag("figure", attrs={
                "class": "code-block",
                "data-copy-visibility": copy_visibility,
            })
            button = result.new_tag("button", attrs={
                "type": "button",
                "class": "copy-code",
                "data-code": source,
                "data-feedback-duration": str(feedback_duration),
                "aria-label": "Copy code",
            })
            button.string = "Copy"
            block.wrap(figure)
            figure.insert(0, button)

    return result


def _is_text(node) -> bool:
    return isinstance(node, NavigableString) and not isinstance(node, PreformattedString)


def format_tree(tree: Tree) -> Tree:
    """Нормализация пробелов между блочными элементами"""
    result = _copy(tree)
    containers = [result] + [
        tag for tag in result.find_all(BLOCK_CONTAINERS) if tag.find_parent("pre") is None
    ]

    for container in containers:
        children = list(container.children)
        if any(_is_text(child) and child.strip() for child in children):
            # смешанное содержимое не трогаем
            continue
        for child in children:
            if _is_text(child):
                child.extract()
        for child in list(container.children):
            child.insert_after("\n")
        if container is not result and container.contents:
            container.insert(0, "\n")

    return result


def serialize(tree: Tree) -> str:
    """Сериализация дерева в строку"""
    return str(tree)


class MarkupPipeline:
    """Фиксированная цепочка этапов рендера markdown в HTML"""

    def __init__(self, options: Optional[PipelineOptions] = None):
        self.options = options or PipelineOptions()

    @property
    def tree_stages(self) -> List[Tuple[str, Stage]]:
        options = self.options
        stages: List[Tuple[str, Stage]] = []
        if options.standalone:
            stages.append(("wrap_document", partial(wrap_document, title=options.document_title)))
        stages.append(("assign_heading_ids", assign_heading_ids))
        if options.autolink:
            stages.append(("autolink_headings", autolink_headings))
        stages.append(("highlight_code", partial(
            highlight_code,
            copy_button=options.copy_button,
            copy_visibility=options.copy_visibility,
            feedback_duration=options.feedback_duration,
        )))
        stages.append(("format", format_tree))
        return stages

    def render(self, body: str) -> str:
        """Рендер тела поста в HTML; при ошибке возвращает экранированный текст"""
        try:
            tree = convert_to_html(parse_markdown(body))
            for _, stage in self.tree_stages:
                tree = stage(tree)
            return serialize(tree)
        except Exception as e:
            logger.error(f"Markdown rendering failed, falling back to raw text: {e}")
            return self.render_fallback(body)

    def render_fallback(self, body: str) -> str:
        """Экранированный исходный текст в обёртке <pre>"""
        fragment = f'<pre class="raw-content">{escape(body)}</pre>'
        if self.options.standalone:
            return DOCUMENT_TEMPLATE.format(title=escape(self.options.document_title)).replace(
                "<body></body>", f"<body>{fragment}</body>"
            )
        return fragment


def highlight_stylesheet(style: str = "default") -> str:
    """CSS для подсветки синтаксиса Pygments"""
    try:
        formatter = HtmlFormatter(style=style, cssclass="highlight")
    except ClassNotFound:
        logger.warning(f"Unknown Pygments style '{style}', using default")
        formatter = HtmlFormatter(cssclass="highlight")
    return formatter.get_style_defs(".highlight")
