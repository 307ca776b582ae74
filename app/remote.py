"""Клиент внешнего сервиса конвертации Unicode -> LMG с повторами."""

from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable, Optional

import httpx

from .config import (
    REMOTE_BACKOFF_MS,
    REMOTE_RETRIES,
    REMOTE_SNIPPET_CHARS,
    REMOTE_URL,
    RETRYABLE_STATUSES,
    load_remote_headers,
)
from .errors import RemoteBlockedError, RemoteTransientError

logger = logging.getLogger(__name__)

Sleep = Callable[[float], Awaitable[None]]


def backoff_delay(attempt: int, base_ms: int = REMOTE_BACKOFF_MS) -> float:
    """Задержка перед повтором в секундах: base * 2^attempt, без джиттера."""
    return base_ms * (2 ** attempt) / 1000.0


class RemoteConverter:
    """Вызов внешнего конвертера с экспоненциальным backoff.

    Повторяются сетевые сбои и ответы 429/502/503/504: до ``retries``
    повторов (``retries + 1`` попыток). Остальные статусы не повторяются.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        url: str = REMOTE_URL,
        retries: int = REMOTE_RETRIES,
        backoff_ms: int = REMOTE_BACKOFF_MS,
        sleep: Optional[Sleep] = None,
    ) -> None:
        self.client = client
        self.url = url
        self.retries = retries
        self.backoff_ms = backoff_ms
        self.sleep = sleep or asyncio.sleep

    async def _post_once(self, text: str) -> httpx.Response:
        try:
            resp = await self.client.post(
                self.url,
                data={"modify_string": text},
                headers=load_remote_headers(),
            )
        except httpx.TransportError as exc:
            raise RemoteTransientError(f"REMOTE_UNREACHABLE: {exc}") from exc
        if resp.status_code in RETRYABLE_STATUSES:
            raise RemoteTransientError(
                f"REMOTE_BLOCKED_{resp.status_code}",
                status=resp.status_code,
                snippet=resp.text[:REMOTE_SNIPPET_CHARS],
            )
        return resp

    async def fetch_with_retry(self, text: str) -> httpx.Response:
        """Отправляет запрос, повторяя временные сбои."""
        for attempt in range(self.retries + 1):
            try:
                return await self._post_once(text)
            except RemoteTransientError as exc:
                if attempt >= self.retries:
                    logger.error(
                        "Remote convert failed after %d attempts: %s",
                        attempt + 1,
                        exc,
                    )
                    raise RemoteBlockedError(
                        _blocked_message(exc.status, exc.snippet, exc),
                        status=exc.status,
                        snippet=exc.snippet,
                    ) from exc
                delay = backoff_delay(attempt, self.backoff_ms)
                logger.warning(
                    "Remote convert attempt %d/%d failed (%s), retry in %.0f ms",
                    attempt + 1,
                    self.retries + 1,
                    exc,
                    delay * 1000,
                )
                await self.sleep(delay)
        raise RemoteBlockedError("REMOTE_BLOCKED: no attempts made")

    async def convert(self, text: str) -> str:
        """Конвертирует кусок текста; снимает один завершающий перевод строки."""
        resp = await self.fetch_with_retry(text)
        body = resp.text or ""
        if not resp.is_success:
            snippet = body[:REMOTE_SNIPPET_CHARS]
            raise RemoteBlockedError(
                _blocked_message(resp.status_code, snippet),
                status=resp.status_code,
                snippet=snippet,
            )
        if body.endswith("\r\n"):
            return body[:-2]
        if body.endswith("\n"):
            return body[:-1]
        return body


def _blocked_message(
    status: Optional[int], snippet: str, cause: Optional[Exception] = None
) -> str:
    if status is None:
        return str(cause) if cause is not None else "REMOTE_UNREACHABLE"
    return f"REMOTE_BLOCKED_{status}: {snippet}"
