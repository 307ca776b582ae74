"""Исключения конвейера LMG-конвертации."""

from __future__ import annotations

from typing import Optional


class ConversionError(Exception):
    """Базовая ошибка конвертации."""

    status_code = 500


class EmptyInputError(ConversionError):
    """Пользователь прислал пустой или пробельный текст."""

    status_code = 400


class PayloadTooLargeError(ConversionError):
    """Текст запроса превышает допустимый размер."""

    status_code = 413


class RemoteError(ConversionError):
    """Ошибка внешнего сервиса конвертации."""

    def __init__(self, message: str, status: Optional[int] = None, snippet: str = ""):
        super().__init__(message)
        self.status = status
        self.snippet = snippet


class RemoteTransientError(RemoteError):
    """Временный сбой (сеть или 429/502/503/504), повторяется клиентом."""


class RemoteBlockedError(RemoteError):
    """Неповторяемый ответ или исчерпаны попытки."""
