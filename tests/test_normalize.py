import pytest

from app.main import clean_lmg


def test_nbsp_and_spaces_collapsed():
    assert clean_lmg("a\u00a0\u00a0b\t\t c") == "a b c"


def test_spaces_around_newlines_stripped():
    assert clean_lmg("a  \n   b") == "a\nb"
    assert clean_lmg("a \r\n b") == "a\nb"


def test_many_newlines_collapse_to_two():
    assert clean_lmg("a\n\n\n\n\nb") == "a\n\nb"
    assert clean_lmg("a\n \n \n b") == "a\n\nb"


def test_space_before_punctuation_removed():
    assert clean_lmg("a , b . c : d ; e") == "a, b. c: d; e"


def test_trim_and_none():
    assert clean_lmg("  \n x \n ") == "x"
    assert clean_lmg(None) == ""


def test_page_marker_untouched():
    assert clean_lmg("a [[PAGE_BREAK]] b") == "a [[PAGE_BREAK]] b"


@pytest.mark.parametrize(
    "text",
    [
        "",
        "   ",
        "a\r \nb",
        "x  ,  y\n\n\n\nz ;",
        "\u00a0 . \t,\n \n:\u00a0;",
        " ,a\r\r\n\n  \n\n b .",
        "abc\rdef",
    ],
)
def test_idempotent(text):
    once = clean_lmg(text)
    assert clean_lmg(once) == once
