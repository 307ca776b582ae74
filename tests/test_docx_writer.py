import io

from docx import Document
from docx.shared import Pt

from app.docx_writer import render_docx
from app.markup import BuildOptions, build_pages


def _load(markup, opts):
    return Document(io.BytesIO(render_docx(build_pages(markup, opts))))


def test_runs_carry_font_and_style():
    doc = _load("<i>a</i>b", BuildOptions(font="LMG-Arun", size=28, default_bold=True))
    runs = doc.paragraphs[0].runs
    assert [r.text for r in runs] == ["a", "b"]
    assert runs[0].italic is True
    assert runs[1].italic is False
    assert all(r.bold is True for r in runs)
    assert all(r.font.name == "LMG-Arun" for r in runs)
    assert runs[0].font.size == Pt(14)


def test_page_break_paragraph_between_pages():
    doc = _load("a----- NEW PAGE -----b", BuildOptions())
    texts = [p.text for p in doc.paragraphs]
    assert texts == ["a", "", "b"]
    assert doc.paragraphs[1].paragraph_format.page_break_before is True
    assert not doc.paragraphs[0].paragraph_format.page_break_before
