"""Нормализация пробелов и пунктуации в LMG-тексте."""

from __future__ import annotations

import re

_NBSP = "\u00a0"
_HSPACE_RE = re.compile(r"[\t ]+")
_NEWLINE_SPACES_RE = re.compile(r"[ \r]*\n *")
_MANY_NEWLINES_RE = re.compile(r"\n{3,}")
_SPACE_BEFORE_PUNCT_RE = re.compile(r" ([,.:;])")


def clean_lmg(text: str | None) -> str:
    """Приводит текст к каноническому виду.

    Неразрывные пробелы заменяются обычными, серии пробелов и табов
    схлопываются, пробелы вокруг переводов строк убираются, три и более
    перевода строки сводятся к двум, пробел перед ``, . : ;`` удаляется.
    Функция идемпотентна.
    """
    cleaned = (text or "").replace(_NBSP, " ")
    cleaned = _HSPACE_RE.sub(" ", cleaned)
    cleaned = _NEWLINE_SPACES_RE.sub("\n", cleaned)
    cleaned = _MANY_NEWLINES_RE.sub("\n\n", cleaned)
    cleaned = _SPACE_BEFORE_PUNCT_RE.sub(r"\1", cleaned)
    return cleaned.strip()
