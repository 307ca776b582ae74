"""Pydantic-модели запросов и ответов сервиса."""

from __future__ import annotations

from typing import Optional, Union

from pydantic import BaseModel

from .config import MAX_CHUNK_CHARS


class ConvertRequest(BaseModel):
    """Текст в Unicode для перевода в кодировку LMG."""

    text: Optional[str] = None


class DocxRequest(BaseModel):
    """Параметры выгрузки результата в Word-документ."""

    lmgHtml: Optional[str] = None
    lmgText: Optional[str] = None
    weight: Optional[Union[str, int, float]] = None
    fontName: Optional[str] = None


class ChunkItem(BaseModel):
    """Единичный чанк строки с позицией и индексом."""

    page: int = 0
    line: int = 0
    index: int
    start: int
    end: int
    text: str


class ChunkRequest(BaseModel):
    """Параметры предпросмотра нарезки."""

    text: str
    max_chars: int = MAX_CHUNK_CHARS


class ChunkResponse(BaseModel):
    """Ответ с набором чанков и метаданными."""

    chunks: list[ChunkItem]
    meta: dict
