import string

import pytest

from asciidraw.fonts import FONT_5X7, FONT_8X12, FONT_11X16, Font

PRINTABLE = list(string.printable[:95].replace("\t", "").replace("\n", ""))
VISIBLE = [chr(code) for code in range(0x21, 0x7F)]


def test_glyph_counts_match_tables():
    assert len(FONT_5X7) == 96
    assert len(FONT_11X16) == 95
    assert len(FONT_8X12) == 95
    assert FONT_5X7.glyph(chr(0x20 + 95)) == (0x00, 0x06, 0x09, 0x09, 0x06)
    assert len(FONT_11X16.glyph(chr(0x20 + 94))) == 11
    assert len(FONT_8X12.glyph(chr(0x20 + 94))) == 12
    with pytest.raises(ValueError):
        FONT_11X16.glyph(chr(0x20 + 95))
    with pytest.raises(ValueError):
        FONT_8X12.glyph(chr(0x20 + 95))


def test_first_and_last_codes():
    assert FONT_5X7.first == 0x20
    assert FONT_5X7.last == 0x7F
    assert FONT_11X16.last == ord("~")
    assert FONT_8X12.last == ord("~")
    assert FONT_5X7.glyph(chr(FONT_5X7.first)) == (0,) * 5
    assert FONT_5X7.glyph(chr(FONT_5X7.last)) == (0x00, 0x06, 0x09, 0x09, 0x06)
    assert FONT_11X16.glyph(chr(FONT_11X16.last)) == (
        0x0010, 0x0018, 0x000C, 0x0004, 0x000C, 0x0018,
        0x0010, 0x0018, 0x000C, 0x0004, 0x0000,
    )
    assert FONT_8X12.glyph(chr(FONT_8X12.last)) == (
        0x00, 0x76, 0xDC, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00,
    )


def test_5x7_glyph_values():
    assert FONT_5X7.glyph("A") == (0x7E, 0x11, 0x11, 0x11, 0x7E)
    assert FONT_5X7.glyph("a") == (0x20, 0x54, 0x54, 0x54, 0x78)
    assert FONT_5X7.glyph("\x7f") == (0x00, 0x06, 0x09, 0x09, 0x06)


def test_11x16_glyph_values():
    assert FONT_11X16.glyph("0") == (
        0x07F8, 0x1FFE, 0x1E06, 0x3303, 0x3183, 0x30C3,
        0x3063, 0x3033, 0x181E, 0x1FFE, 0x07F8,
    )
    assert FONT_11X16.glyph("_") == (0xC000,) * 11


def test_8x12_glyph_values():
    assert FONT_8X12.glyph("A") == (
        0x00, 0x38, 0x6C, 0xC6, 0xC6, 0xC6, 0xFE, 0xC6, 0xC6, 0xC6, 0x00, 0x00,
    )
    assert FONT_8X12.glyph("_")[-1] == 0xFF


def test_space_is_blank():
    assert FONT_5X7.glyph(" ") == (0,) * 5
    assert FONT_11X16.glyph(" ") == (0,) * 11
    assert FONT_8X12.glyph(" ") == (0,) * 12


@pytest.mark.parametrize("char", PRINTABLE)
def test_every_printable_glyph_has_right_shape(char):
    glyph_5x7 = FONT_5X7.glyph(char)
    assert len(glyph_5x7) == 5
    assert all(0 <= strip < (1 << FONT_5X7.bits) for strip in glyph_5x7)

    glyph_11x16 = FONT_11X16.glyph(char)
    assert len(glyph_11x16) == 11
    assert all(0 <= strip < (1 << FONT_11X16.bits) for strip in glyph_11x16)

    glyph_8x12 = FONT_8X12.glyph(char)
    assert len(glyph_8x12) == 12
    assert all(0 <= strip < (1 << FONT_8X12.bits) for strip in glyph_8x12)


def test_all_visible_ascii_contained():
    for code in range(0x20, 0x7F):
        char = chr(code)
        assert char in FONT_5X7 and len(FONT_5X7.glyph(char)) == 5
        assert char in FONT_11X16 and len(FONT_11X16.glyph(char)) == 11
        assert char in FONT_8X12 and len(FONT_8X12.glyph(char)) == 12


def test_visible_characters_other_than_space_are_inked():
    assert [c for c in VISIBLE if not any(FONT_5X7.glyph(c))] == []
    assert [c for c in VISIBLE if not any(FONT_11X16.glyph(c))] == []
    assert [c for c in VISIBLE if not any(FONT_8X12.glyph(c))] == []


def test_uppercase_differs_from_lowercase():
    assert FONT_5X7.glyph("A") != FONT_5X7.glyph("a")
    assert FONT_11X16.glyph("A") != FONT_11X16.glyph("a")
    assert FONT_8X12.glyph("A") != FONT_8X12.glyph("a")


def test_below_range_raises():
    with pytest.raises(ValueError):
        FONT_5X7.glyph("\x1f")
    with pytest.raises(ValueError):
        FONT_11X16.glyph("\x1f")
    with pytest.raises(ValueError):
        FONT_8X12.glyph("\x1f")


def test_degree_only_in_5x7():
    assert "\x7f" in FONT_5X7
    assert "\x7f" not in FONT_11X16
    with pytest.raises(ValueError):
        FONT_11X16.glyph("\x7f")
    with pytest.raises(ValueError):
        FONT_8X12.glyph("\x7f")


@pytest.mark.parametrize("bad", ["", "ab", 65, None])
def test_non_single_character_raises(bad):
    with pytest.raises(TypeError):
        FONT_5X7.glyph(bad)


def test_non_ascii_raises():
    with pytest.raises(ValueError):
        FONT_5X7.glyph("\u00e9")


def test_contains_rejects_non_strings():
    assert FONT_5X7.__contains__(65) is False
    assert FONT_5X7.__contains__("AB") is False
    assert FONT_5X7.__contains__("A") is True
    assert FONT_5X7.glyph("A") == (0x7E, 0x11, 0x11, 0x11, 0x7E)


def test_custom_font_round_trip():
    font = Font(name="tiny", strips=2, bits=2, glyphs=((1, 2), (3, 0)), first=ord("x"))
    assert font.glyph("x") == (1, 2)
    assert font.glyph("y") == (3, 0)
    assert font.last == ord("y")
    with pytest.raises(ValueError):
        font.glyph("z")


def test_custom_font_rejects_wrong_strip_count():
    with pytest.raises(ValueError):
        Font(name="bad", strips=3, bits=4, glyphs=((1, 2),))


def test_custom_font_rejects_overwide_strip():
    with pytest.raises(ValueError):
        Font(name="bad", strips=1, bits=4, glyphs=((0x10,),))