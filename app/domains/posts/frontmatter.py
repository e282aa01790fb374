"""Разбор front matter в начале markdown-файла.

Блок метаданных задаётся YAML между строками ``---`` в самом начале текста.
Скалярные значения остаются строками (``BaseLoader``), списки и вложенные
словари сохраняют свою структуру.
"""
import logging
from typing import Any, Dict, Tuple

import yaml

logger = logging.getLogger(__name__)

OPEN_DELIMITER = "---"
CLOSE_DELIMITERS = ("---", "...")


def parse_front_matter(text: str) -> Tuple[Dict[str, Any], str]:
    """Разделение текста на метаданные и тело документа"""
    source = text[1:] if text.startswith("\ufeff") else text
    lines = source.splitlines(keepends=True)

    if not lines or lines[0].rstrip("\r\n") != OPEN_DELIMITER:
        return {}, text

    for index, line in enumerate(lines[1:], start=1):
        if line.rstrip("\r\n").rstrip() in CLOSE_DELIMITERS:
            block = "".join(lines[1:index])
            body = "".join(lines[index + 1:])
            break
    else:
        logger.warning("Front matter block is not terminated, treating file as plain body")
        return {}, text

    try:
        data = yaml.load(block, Loader=yaml.BaseLoader)
    except yaml.YAMLError as e:
        logger.warning(f"Malformed front matter ignored: {e}")
        return {}, text

    if data is None:
        return {}, body

    if not isinstance(data, dict):
        logger.warning(f"Front matter must be a mapping, got {type(data).__name__}")
        return {}, text

    return data, body


def dump_front_matter(metadata: Dict[str, Any], body: str = "") -> str:
    """Сборка текста документа из метаданных и тела"""
    if not metadata:
        return body

    block = yaml.safe_dump(metadata, allow_unicode=True, sort_keys=False)
    return f"{OPEN_DELIMITER}\n{block}{OPEN_DELIMITER}\n{body}"
