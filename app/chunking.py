"""Нарезка текста на страницы, строки и сетевые чанки."""

from __future__ import annotations

import re
from typing import List

from .config import MAX_CHUNK_CHARS, MIN_CUT_OFFSET, PAGE_MARK
from .schemas import ChunkItem

_LINE_BREAK_RE = re.compile(r"\r?\n")


def split_pages(text: str | None, mark: str = PAGE_MARK) -> List[str]:
    """Делит текст по маркеру разрыва страницы (маркер не изменяется)."""
    return (text or "").split(mark)


def split_lines(page: str | None) -> List[str]:
    """Делит страницу на строки, сохраняя пустые строки."""
    return _LINE_BREAK_RE.split(page or "")


def split_into_chunks(
    text: str | None,
    max_chars: int = MAX_CHUNK_CHARS,
    min_cut: int = MIN_CUT_OFFSET,
) -> List[str]:
    """Режет строку на куски не длиннее ``max_chars``.

    В каждом окне ищется последний пробел; если он дальше ``min_cut``
    символов от начала окна, разрез делается сразу после него (пробел
    остаётся в предыдущем куске), иначе режем по жёсткой границе.
    Конкатенация результата в точности равна исходной строке.
    """
    if max_chars <= 0:
        raise ValueError("max_chars must be > 0")
    t = text or ""
    chunks: list[str] = []
    i = 0
    while i < len(t):
        end = min(i + max_chars, len(t))
        cut = end
        last_space = t.rfind(" ", i, end) - i
        if last_space > min_cut:
            cut = i + last_space + 1
        chunks.append(t[i:cut])
        i = cut
    return chunks


def chunk_spans(
    text: str | None,
    max_chars: int = MAX_CHUNK_CHARS,
    min_cut: int = MIN_CUT_OFFSET,
) -> list[ChunkItem]:
    """То же, что ``split_into_chunks``, но с позициями кусков в строке."""
    items: list[ChunkItem] = []
    pos = 0
    for idx, piece in enumerate(split_into_chunks(text, max_chars, min_cut)):
        items.append(ChunkItem(index=idx, start=pos, end=pos + len(piece), text=piece))
        pos += len(piece)
    return items
