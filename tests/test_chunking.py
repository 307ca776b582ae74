import pytest

from app.chunking import chunk_spans, split_into_chunks, split_lines, split_pages


def _words(count: int) -> str:
    return " ".join(f"word{i:03d}" for i in range(count))


def test_empty_line_has_no_chunks():
    assert split_into_chunks("") == []
    assert split_into_chunks(None) == []


def test_short_line_is_single_chunk():
    assert split_into_chunks("hello world") == ["hello world"]


@pytest.mark.parametrize("max_chars", [1, 7, 61, 100, 420, 1000])
def test_chunks_reconstruct_line_and_respect_bound(max_chars):
    line = _words(150) + "  tail"
    chunks = split_into_chunks(line, max_chars)
    assert "".join(chunks) == line
    assert all(0 < len(c) <= max_chars for c in chunks)


def test_cut_after_last_space_keeps_space_with_previous_chunk():
    line = _words(100)
    chunks = split_into_chunks(line, 420)
    assert len(chunks) == 2
    assert chunks[0].endswith(" ")
    assert not chunks[1].startswith(" ")
    assert len(chunks[0]) == 416


def test_space_too_close_to_start_forces_hard_cut():
    line = "ab " + "x" * 200
    chunks = split_into_chunks(line, 100)
    assert [len(c) for c in chunks] == [100, 100, 3]


def test_min_cut_is_configurable():
    line = "ab " + "x" * 200
    chunks = split_into_chunks(line, 100, min_cut=1)
    assert chunks[0] == "ab "


def test_invalid_max_chars():
    with pytest.raises(ValueError):
        split_into_chunks("abc", 0)


def test_chunk_spans_positions():
    line = _words(100)
    spans = chunk_spans(line)
    assert [s.index for s in spans] == [0, 1]
    assert spans[0].start == 0
    assert spans[1].start == spans[0].end
    assert spans[-1].end == len(line)
    assert all(line[s.start : s.end] == s.text for s in spans)


def test_split_pages_and_lines():
    assert split_pages("a[[PAGE_BREAK]]b[[PAGE_BREAK]]") == ["a", "b", ""]
    assert split_lines("a\r\nb\n\nc") == ["a", "b", "", "c"]
