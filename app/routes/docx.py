"""Маршрут выгрузки LMG-результата в Word-документ."""

from __future__ import annotations

import logging

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse, Response

from ..config import (
    BOLD_WEIGHT_THRESHOLD,
    DEFAULT_FONT_NAME,
    DEFAULT_FONT_SIZE,
    DEFAULT_WEIGHT,
    DOCX_FILENAME,
    DOCX_MEDIA_TYPE,
)
from ..docx_writer import render_docx
from ..errors import EmptyInputError, PayloadTooLargeError
from ..markup import BuildOptions, build_pages
from ..schemas import DocxRequest
from .convert import check_payload_size, error_response

logger = logging.getLogger(__name__)

router = APIRouter()


def is_bold_weight(weight: object) -> bool:
    """``weight`` >= 700 включает жирное начертание по умолчанию."""
    try:
        return float(str(weight).strip()) >= BOLD_WEIGHT_THRESHOLD
    except ValueError:
        return False


@router.post("/download-docx")
def download_docx(req: DocxRequest) -> Response:
    """Строит docx из HTML-разметки (или простого текста) результата."""
    lmg_html = req.lmgHtml or ""
    content = lmg_html if lmg_html.strip() else (req.lmgText or "")
    weight = req.weight or DEFAULT_WEIGHT
    opts = BuildOptions(
        font=req.fontName or DEFAULT_FONT_NAME,
        size=DEFAULT_FONT_SIZE,
        default_bold=is_bold_weight(weight),
    )
    try:
        if not content.strip():
            raise EmptyInputError("Empty output")
        check_payload_size(content)
        pages = build_pages(content, opts)
        payload = render_docx(pages)
    except (EmptyInputError, PayloadTooLargeError) as exc:
        logger.warning("/download-docx rejected: %s", exc)
        return error_response(exc)
    except Exception as exc:
        logger.exception("/download-docx error: %s", exc)
        return PlainTextResponse(str(exc) or "docx error", status_code=500)
    logger.info("Built docx: %d page(s), %d bytes", len(pages), len(payload))
    return Response(
        content=payload,
        media_type=DOCX_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{DOCX_FILENAME}"'},
    )
