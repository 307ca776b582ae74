"""Разбор упрощённой HTML-разметки в страницы, абзацы и стилизованные фрагменты."""

from __future__ import annotations

import re
from dataclasses import dataclass, field, replace
from typing import List

from .config import DEFAULT_FONT_NAME, DEFAULT_FONT_SIZE, PAGE_SEPARATOR_TOKEN

_EMPTY_DIV_RE = re.compile(r"<div><br></div>", re.IGNORECASE)
_BR_RE = re.compile(r"<br\s*/?>", re.IGNORECASE)
_TAG_SPLIT_RE = re.compile(r"(</?[^>]+>)")

_BOLD_OPEN = ("<b>", "<strong>")
_BOLD_CLOSE = ("</b>", "</strong>")
_ITALIC_OPEN = ("<i>", "<em>")
_ITALIC_CLOSE = ("</i>", "</em>")
_PARAGRAPH_CLOSE = ("</div>", "</p>")


@dataclass(frozen=True)
class BuildOptions:
    font: str = DEFAULT_FONT_NAME
    size: int = DEFAULT_FONT_SIZE
    default_bold: bool = True


@dataclass(frozen=True)
class StyledRun:
    """Фрагмент текста с одним набором атрибутов."""

    text: str
    bold: bool = False
    italic: bool = False
    font: str = DEFAULT_FONT_NAME
    size: int = DEFAULT_FONT_SIZE


@dataclass
class DocumentParagraph:
    runs: List[StyledRun]


@dataclass
class DocumentPage:
    """Страница документа; все страницы кроме первой начинаются с разрыва."""

    paragraphs: List[DocumentParagraph]
    page_break_before: bool = False


@dataclass
class ParserState:
    """Состояние разбора, протягиваемое через все токены документа.

    Флаги ``bold``/``italic`` переживают границы абзацев и страниц.
    Закрывающий ``</b>`` возвращает жирность к значению по умолчанию
    для документа, а не к предыдущему состоянию.
    """

    bold: bool
    italic: bool = False
    runs: List[StyledRun] = field(default_factory=list)
    paragraphs: List[DocumentParagraph] = field(default_factory=list)


def prepare_markup(markup: str | None) -> str:
    """Убирает ``\\r`` и NBSP, пустой ``<div><br></div>`` превращает в перевод строки."""
    safe = (markup or "").replace("\r", "").replace("\u00a0", " ")
    safe = _EMPTY_DIV_RE.sub("<div>\n</div>", safe)
    return _BR_RE.sub("\n", safe)


def tokenize(markup: str) -> List[str]:
    """Делит разметку на теги и текст."""
    return [tok for tok in _TAG_SPLIT_RE.split(markup) if tok]


def _blank_run(state: ParserState, opts: BuildOptions) -> StyledRun:
    return StyledRun(
        text=" ", bold=state.bold, italic=state.italic, font=opts.font, size=opts.size
    )


def _flush_paragraph(state: ParserState, opts: BuildOptions) -> ParserState:
    runs = state.runs or [_blank_run(state, opts)]
    state.paragraphs.append(DocumentParagraph(runs=runs))
    state.runs = []
    return state


def _push_text(state: ParserState, text: str, opts: BuildOptions) -> ParserState:
    parts = text.split("\n")
    for i, piece in enumerate(parts):
        if piece:
            run = StyledRun(
                text=piece,
                bold=state.bold,
                italic=state.italic,
                font=opts.font,
                size=opts.size,
            )
            state.runs.append(run)
        if i < len(parts) - 1:
            state = _flush_paragraph(state, opts)
    return state


def apply_token(state: ParserState, token: str, opts: BuildOptions) -> ParserState:
    """Один шаг свёртки: применяет токен к состоянию и возвращает его.

    Списки фрагментов и абзацев пополняются на месте.
    """
    tag = token.lower()
    if tag in _BOLD_OPEN:
        state.bold = True
        return state
    if tag in _BOLD_CLOSE:
        # TODO: восстанавливать жирность охватывающего тега, если фронтенд
        # начнёт присылать вложенные <b>; сейчас сброс идёт к умолчанию.
        state.bold = opts.default_bold
        return state
    if tag in _ITALIC_OPEN:
        state.italic = True
        return state
    if tag in _ITALIC_CLOSE:
        state.italic = False
        return state
    if tag in _PARAGRAPH_CLOSE:
        return _flush_paragraph(state, opts)
    if tag.startswith("<"):
        return state
    return _push_text(state, token, opts)


def parse_paragraphs(
    markup: str, opts: BuildOptions, state: ParserState | None = None
) -> ParserState:
    """Разбирает разметку одной страницы; возвращает итоговое состояние.

    Готовые абзацы лежат в ``state.paragraphs``; незакрытые фрагменты
    в конце сбрасываются в последний абзац.
    """
    if state is None:
        state = ParserState(bold=opts.default_bold)
    state = replace(state, runs=[], paragraphs=[])
    for token in tokenize(prepare_markup(markup)):
        state = apply_token(state, token, opts)
    if state.runs:
        state = _flush_paragraph(state, opts)
    return state


def build_pages(markup: str, opts: BuildOptions) -> List[DocumentPage]:
    """Строит страницы документа из разметки с разделителями страниц.

    Каждая страница содержит хотя бы один абзац, каждый абзац хотя бы
    один фрагмент.
    """
    pages: list[DocumentPage] = []
    state = ParserState(bold=opts.default_bold)
    for index, page_markup in enumerate((markup or "").split(PAGE_SEPARATOR_TOKEN)):
        state = parse_paragraphs(page_markup.strip(), opts, state)
        paragraphs = state.paragraphs
        if not paragraphs:
            filler = StyledRun(
                text=" ", bold=opts.default_bold, font=opts.font, size=opts.size
            )
            paragraphs = [DocumentParagraph(runs=[filler])]
        pages.append(
            DocumentPage(paragraphs=list(paragraphs), page_break_before=index > 0)
        )
    return pages
