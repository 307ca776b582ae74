"""Последовательная конвертация страниц, строк и чанков через внешний сервис.

Вызовы идут строго по очереди: внешний сервис ограничивает частоту
запросов, а порядок вывода должен совпадать с порядком ввода.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable, Optional, Protocol

from .chunking import split_into_chunks, split_lines, split_pages
from .config import (
    CHUNK_PAUSE_MS,
    MAX_CHUNK_CHARS,
    MIN_CUT_OFFSET,
    PAGE_MARK,
    PAGE_SEPARATOR,
)
from .normalize import clean_lmg

logger = logging.getLogger(__name__)


class Converter(Protocol):
    async def convert(self, text: str) -> str: ...


class DocumentConverter:
    """Собирает LMG-текст документа из ответов внешнего конвертера."""

    def __init__(
        self,
        remote: Converter,
        page_mark: str = PAGE_MARK,
        max_chars: int = MAX_CHUNK_CHARS,
        min_cut: int = MIN_CUT_OFFSET,
        pause_ms: int = CHUNK_PAUSE_MS,
        sleep: Optional[Callable[[float], Awaitable[None]]] = None,
    ) -> None:
        self.remote = remote
        self.page_mark = page_mark
        self.max_chars = max_chars
        self.min_cut = min_cut
        self.pause_ms = pause_ms
        self.sleep = sleep or asyncio.sleep
        self.calls = 0

    async def convert_line(self, line: str) -> str:
        """Конвертирует одну непустую строку по чанкам."""
        chunks = split_into_chunks(line, self.max_chars, self.min_cut)
        out = ""
        for i, chunk in enumerate(chunks):
            safe_part = chunk.replace("\u00a0", " ").strip()
            converted = await self.remote.convert(safe_part)
            self.calls += 1
            piece = clean_lmg(converted)
            if piece:
                if out and not out[-1].isspace() and not piece[0].isspace():
                    out += " "
                out += piece
            if i < len(chunks) - 1:
                await self.sleep(self.pause_ms / 1000.0)
        return clean_lmg(out)

    async def convert_page(self, page: str) -> str:
        converted_lines: list[str] = []
        for line in split_lines(page):
            if not line.strip():
                converted_lines.append("")
                continue
            converted_lines.append(clean_lmg(await self.convert_line(line)))
        return "\n".join(converted_lines)

    async def convert_document(self, raw_text: str) -> str:
        """Конвертирует весь текст, сохраняя страницы и пустые строки.

        Любая ошибка внешнего сервиса прерывает весь запрос.
        """
        pages = split_pages(raw_text, self.page_mark)
        converted_pages = [await self.convert_page(page) for page in pages]
        logger.info(
            "Converted %d page(s) with %d remote call(s)", len(pages), self.calls
        )
        return clean_lmg(PAGE_SEPARATOR.join(converted_pages))


async def convert_document(raw_text: str, remote: Converter, **kwargs) -> str:
    """Упрощённая обёртка над ``DocumentConverter.convert_document``."""
    return await DocumentConverter(remote, **kwargs).convert_document(raw_text)
