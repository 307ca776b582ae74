"""Сериализация страниц в Word-документ (docx)."""

from __future__ import annotations

import io
from typing import Iterable, TYPE_CHECKING

from docx import Document
from docx.oxml.ns import qn
from docx.shared import Pt

from .markup import DocumentPage, StyledRun

if TYPE_CHECKING:
    from docx.text.paragraph import Paragraph


def _add_run(paragraph: "Paragraph", styled: StyledRun) -> None:
    run = paragraph.add_run(styled.text)
    run.bold = styled.bold
    run.italic = styled.italic
    run.font.name = styled.font
    # Размер хранится в полупунктах.
    run.font.size = Pt(styled.size / 2)
    run._element.rPr.rFonts.set(qn("w:eastAsia"), styled.font)


def render_docx(pages: Iterable[DocumentPage]) -> bytes:
    """Собирает docx из страниц и возвращает его байты."""
    doc = Document()
    for page in pages:
        if page.page_break_before:
            marker = doc.add_paragraph()
            marker.add_run("")
            marker.paragraph_format.page_break_before = True
        for paragraph in page.paragraphs:
            p = doc.add_paragraph()
            for styled in paragraph.runs:
                _add_run(p, styled)

    buf = io.BytesIO()
    doc.save(buf)
    return buf.getvalue()
