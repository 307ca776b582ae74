"""Запуск сервиса: ``python -m app``."""

from __future__ import annotations

import uvicorn

from .config import PORT
from .main import app

if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=PORT)
