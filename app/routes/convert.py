"""Маршрут конвертации Unicode-текста в кодировку LMG."""

from __future__ import annotations

import logging
from typing import AsyncIterator

import httpx
from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from ..config import MAX_BODY_MB, REMOTE_TIMEOUT
from ..errors import ConversionError, EmptyInputError, PayloadTooLargeError
from ..pipeline import DocumentConverter
from ..remote import RemoteConverter
from ..schemas import ConvertRequest

logger = logging.getLogger(__name__)

router = APIRouter()


async def get_remote_converter() -> AsyncIterator[RemoteConverter]:
    """Клиент внешнего сервиса, живущий ровно один запрос."""
    async with httpx.AsyncClient(timeout=REMOTE_TIMEOUT, follow_redirects=True) as client:
        yield RemoteConverter(client)


def check_payload_size(text: str) -> None:
    size_mb = len(text.encode("utf-8")) / (1024 * 1024)
    if size_mb > MAX_BODY_MB:
        raise PayloadTooLargeError(
            f"Payload too large: {size_mb:.1f} MB > {MAX_BODY_MB} MB"
        )


def error_response(exc: Exception) -> PlainTextResponse:
    status = exc.status_code if isinstance(exc, ConversionError) else 500
    return PlainTextResponse(str(exc) or "convert error", status_code=status)


@router.post("/convert-lmg", response_class=PlainTextResponse)
async def convert_lmg(
    req: ConvertRequest,
    remote: RemoteConverter = Depends(get_remote_converter),
) -> PlainTextResponse:
    """Конвертирует текст постранично и построчно через внешний сервис."""
    text = req.text or ""
    try:
        if not text.strip():
            raise EmptyInputError("Empty text")
        check_payload_size(text)
        converted = await DocumentConverter(remote).convert_document(text)
    except (EmptyInputError, PayloadTooLargeError) as exc:
        logger.warning("/convert-lmg rejected: %s", exc)
        return error_response(exc)
    except Exception as exc:
        logger.exception("/convert-lmg error: %s", exc)
        return error_response(exc)
    return PlainTextResponse(converted)
