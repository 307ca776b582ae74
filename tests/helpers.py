"""Общие заглушки для тестов: внешний конвертер и запись пауз."""

from __future__ import annotations

from typing import Callable

import httpx

from app.errors import RemoteBlockedError


class SleepRecorder:
    """Записывает запрошенные задержки вместо реального ожидания."""

    def __init__(self) -> None:
        self.delays: list[float] = []

    async def __call__(self, delay: float) -> None:
        self.delays.append(delay)


class FakeRemote:
    """Конвертер-заглушка: переводит текст через ``transform``."""

    def __init__(
        self,
        transform: Callable[[str], str] = str.upper,
        fail_on_call: int | None = None,
    ) -> None:
        self.transform = transform
        self.fail_on_call = fail_on_call
        self.inputs: list[str] = []

    async def convert(self, text: str) -> str:
        self.inputs.append(text)
        if self.fail_on_call is not None and len(self.inputs) == self.fail_on_call:
            raise RemoteBlockedError("REMOTE_BLOCKED_503: busy", status=503, snippet="busy")
        return self.transform(text)


def sequence_transport(responses: list) -> tuple[httpx.MockTransport, list[httpx.Request]]:
    """Транспорт, отдающий ответы по очереди; последний повторяется.

    Элемент списка: ``(status, body)`` или исключение для выброса.
    """
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        item = responses[min(len(seen), len(responses)) - 1]
        if isinstance(item, Exception):
            raise item
        status, body = item
        return httpx.Response(status, text=body)

    return httpx.MockTransport(handler), seen
