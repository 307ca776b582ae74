"""Конфигурация и общие настройки сервиса LMG-конвертации."""

from __future__ import annotations

import json
import os
from functools import lru_cache
from pathlib import Path

# Параметры среды
PAGE_MARK = os.getenv("LMG_PAGE_MARK", "[[PAGE_BREAK]]")
PAGE_SEPARATOR_TOKEN = "----- NEW PAGE -----"
PAGE_SEPARATOR = f"\n\n{PAGE_SEPARATOR_TOKEN}\n\n"

MAX_CHUNK_CHARS = int(os.getenv("LMG_MAX_CHUNK_CHARS", "420"))
# Минимальное смещение пробела от начала окна, после которого режем по слову.
MIN_CUT_OFFSET = int(os.getenv("LMG_MIN_CUT_OFFSET", "60"))
CHUNK_PAUSE_MS = int(os.getenv("LMG_CHUNK_PAUSE_MS", "120"))

REMOTE_URL = os.getenv(
    "LMG_REMOTE_URL",
    "https://www.fontconverter.online/gujarati/GetLmgArunText",
)
REMOTE_TIMEOUT = float(os.getenv("LMG_REMOTE_TIMEOUT", "30"))
REMOTE_RETRIES = int(os.getenv("LMG_REMOTE_RETRIES", "4"))
REMOTE_BACKOFF_MS = int(os.getenv("LMG_REMOTE_BACKOFF_MS", "350"))
RETRYABLE_STATUSES = frozenset({429, 502, 503, 504})
REMOTE_SNIPPET_CHARS = 200
REMOTE_HEADERS_PATH = Path(
    os.getenv(
        "LMG_REMOTE_HEADERS_CONFIG",
        Path(__file__).resolve().parent.parent / "config" / "remote_headers.json",
    )
)

DEFAULT_FONT_NAME = os.getenv("LMG_FONT_NAME", "LMG-Arun")
# Размер в полупунктах, как в WordprocessingML (28 -> 14pt).
DEFAULT_FONT_SIZE = 28
DEFAULT_WEIGHT = "700"
BOLD_WEIGHT_THRESHOLD = 700
DOCX_FILENAME = "LMG-Arun-Formatted.docx"
DOCX_MEDIA_TYPE = (
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
)

MAX_BODY_MB = int(os.getenv("MAX_BODY_MB", "10"))
STATIC_DIR = Path(
    os.getenv("LMG_STATIC_DIR", Path(__file__).resolve().parent.parent / "public")
)
PORT = int(os.getenv("PORT", "5050"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


@lru_cache()
def load_remote_headers() -> dict[str, str]:
    """Загружает заголовки запроса к внешнему конвертеру.

    Сервис фильтрует ботов, поэтому запрос должен выглядеть как браузерный.
    Если JSON-файл с переопределениями отсутствует или повреждён,
    используется встроенный набор.
    """
    headers = {
        "Content-Type": "application/x-www-form-urlencoded; charset=UTF-8",
        "User-Agent": (
            "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
            "(KHTML, like Gecko) Chrome/120 Safari/537.36"
        ),
        "Accept": "text/html,*/*",
        "Accept-Language": "en-US,en;q=0.9",
        "Origin": "https://www.fontconverter.online",
        "Referer": "https://www.fontconverter.online/gujarati",
        "X-Requested-With": "XMLHttpRequest",
    }
    if REMOTE_HEADERS_PATH.exists():
        try:
            override = json.loads(REMOTE_HEADERS_PATH.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            return headers
        if isinstance(override, dict):
            headers.update({str(k): str(v) for k, v in override.items()})
    return headers
