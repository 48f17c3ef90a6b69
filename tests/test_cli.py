import io

from asciidraw.chars import render_char_5x7, render_char_11x16
from asciidraw.cli import FONT_PROMPT, MENU_PROMPT, main, run
from asciidraw.shapes import arrow, square, triangle


def session(text):
    out = io.StringIO()
    run(io.StringIO(text), out)
    return out.getvalue()


def test_quit():
    output = session("q\n")
    assert output == "Welcome!\n" + MENU_PROMPT + "Bye!\n"


def test_end_of_input_stops():
    output = session("")
    assert output == "Welcome!\n" + MENU_PROMPT


def test_square():
    output = session("s\nq\n")
    assert "You selected square:\n" + square(5, 5) in output
    assert output.endswith("Bye!\n")


def test_triangle():
    output = session("t\n")
    assert "You selected triangle:\n" + triangle(5, 7) in output
    assert output.count(MENU_PROMPT) == 2


def test_arrow():
    output = session("a\n")
    assert "You selected arrow:\n" + arrow(5, 8) in output


def test_chars_5x7():
    output = session("c\n5\nq\n")
    expected = "".join(render_char_5x7(c) for c in "abc")
    assert "You selected chars:\n" + FONT_PROMPT + expected in output


def test_chars_11x16():
    output = session("c\n\n1\n")
    expected = "".join(render_char_11x16(c) for c in "abc")
    assert FONT_PROMPT + expected in output


def test_chars_unknown_font_prints_nothing():
    output = session("c\n9\nq\n")
    assert output == (
        "Welcome!\n" + MENU_PROMPT + "You selected chars:\n" + FONT_PROMPT
        + MENU_PROMPT + "Bye!\n"
    )


def test_unrecognized_option():
    output = session("x\n")
    assert "Unrecognized option 'x', please try again!\n" in output


def test_each_character_is_a_choice():
    output = session("ts\n")
    assert triangle(5, 7) + MENU_PROMPT + "You selected square:" in output


def test_blank_lines_ignored():
    output = session("\n\n\nq\n")
    assert output.count(MENU_PROMPT) == 1
    assert "Unrecognized" not in output


def test_nothing_after_quit():
    output = session("q\ns\n")
    assert "square" not in output


def test_main(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("s\nq\n"))
    assert main([]) == 0
    captured = capsys.readouterr().out
    assert captured.startswith("Welcome!\n")
    assert square(5, 5) in captured