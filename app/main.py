"""FastAPI-сервис конвертации гуджаратского Unicode-текста в шрифтовую кодировку LMG."""

from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from .chunking import split_into_chunks  # noqa: F401 - re-export для тестов
from .config import LOG_LEVEL, PORT, REMOTE_URL, STATIC_DIR
from .markup import build_pages  # noqa: F401 - re-export для тестов
from .normalize import clean_lmg  # noqa: F401 - re-export для тестов
from .routes import chunk, convert, docx, health
from .routes.convert import get_remote_converter
from .schemas import ChunkItem, ChunkRequest, ChunkResponse, ConvertRequest, DocxRequest

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="LMG converter", version="1.0.0")
app.include_router(health.router)
app.include_router(chunk.router)
app.include_router(convert.router)
app.include_router(docx.router)

if STATIC_DIR.is_dir():
    app.mount("/", StaticFiles(directory=STATIC_DIR, html=True), name="public")


@app.on_event("startup")
def log_startup() -> None:
    """Пишет в лог адрес внешнего конвертера и порт."""
    logger.info("Server running on port %d, upstream %s", PORT, REMOTE_URL)


__all__ = [
    "app",
    "ChunkItem",
    "ChunkRequest",
    "ChunkResponse",
    "ConvertRequest",
    "DocxRequest",
    "clean_lmg",
    "split_into_chunks",
    "build_pages",
    "get_remote_converter",
]
