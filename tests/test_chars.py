import pytest

from asciidraw.chars import render_char_5x7, render_char_8x12, render_char_11x16
from asciidraw.fonts import FONT_5X7, FONT_8X12, FONT_11X16


def _assert_picture(text, font):
    assert text.endswith("\n\n")
    lines = text[:-1].splitlines()
    assert len(lines) == font.strips
    assert all(len(line) == font.bits for line in lines)
    assert set("".join(lines)) <= {"*", " "}


def _set_bits(glyph):
    return sum(bin(strip).count("1") for strip in glyph)


@pytest.mark.parametrize("char", ["a", "b", "c", "A", "0", "~"])
def test_shape_of_picture(char):
    _assert_picture(render_char_5x7(char), FONT_5X7)
    _assert_picture(render_char_11x16(char), FONT_11X16)
    _assert_picture(render_char_8x12(char), FONT_8X12)


def test_space_is_blank():
    text_5x7 = render_char_5x7(" ")
    text_11x16 = render_char_11x16(" ")
    text_8x12 = render_char_8x12(" ")
    assert "*" not in text_5x7 + text_11x16 + text_8x12
    assert text_5x7.count("\n") == FONT_5X7.strips + 1
    assert text_11x16.count("\n") == FONT_11X16.strips + 1
    assert text_8x12.count("\n") == FONT_8X12.strips + 1


@pytest.mark.parametrize("char", ["a", "M", "@", "%"])
def test_star_count_matches_set_bits(char):
    assert render_char_5x7(char).count("*") == _set_bits(FONT_5X7.glyph(char))
    assert render_char_11x16(char).count("*") == _set_bits(FONT_11X16.glyph(char))
    assert render_char_8x12(char).count("*") == _set_bits(FONT_8X12.glyph(char))


def test_vertical_bar_5x7():
    lines = render_char_5x7("|").splitlines()
    assert lines[2] == "*******"
    assert all(line.strip() == "" for index, line in enumerate(lines) if index != 2)


def test_underscore_8x12_last_row_full():
    lines = render_char_8x12("_")[:-1].splitlines()
    assert lines[-1] == "********"
    assert "*" not in "".join(lines[:-1])


def test_degree_sign_only_in_5x7():
    assert "*" in render_char_5x7("\x7f")
    with pytest.raises(ValueError):
        render_char_11x16("\x7f")


def test_rejects_control_character():
    with pytest.raises(ValueError):
        render_char_5x7("\n")
    with pytest.raises(ValueError):
        render_char_11x16("\n")
    with pytest.raises(ValueError):
        render_char_8x12("\n")


def test_rejects_more_than_one_character():
    with pytest.raises(TypeError):
        render_char_5x7("ab")
    with pytest.raises(TypeError):
        render_char_11x16("ab")
    with pytest.raises(TypeError):
        render_char_8x12("ab")