"""Маршрут предпросмотра нарезки текста на чанки."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException

from ..chunking import chunk_spans, split_lines, split_pages
from ..schemas import ChunkItem, ChunkRequest, ChunkResponse

router = APIRouter()


@router.post("/chunk", response_model=ChunkResponse)
async def chunk_text(req: ChunkRequest) -> ChunkResponse:
    """Показывает, какими кусками текст уйдёт во внешний сервис."""
    if req.max_chars <= 0:
        raise HTTPException(400, detail="max_chars must be > 0")

    chunks: list[ChunkItem] = []
    pages = split_pages(req.text)
    lines_total = 0
    for page_no, page in enumerate(pages):
        for line_no, line in enumerate(split_lines(page)):
            lines_total += 1
            if not line.strip():
                continue
            for item in chunk_spans(line, req.max_chars):
                chunks.append(item.model_copy(update={"page": page_no, "line": line_no}))
    return ChunkResponse(
        chunks=chunks,
        meta={
            "count": len(chunks),
            "pages": len(pages),
            "lines": lines_total,
            "max_chars": req.max_chars,
        },
    )
