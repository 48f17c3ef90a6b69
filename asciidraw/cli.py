"""Interactive menu that prints shapes and font samples."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator
from typing import TextIO

from .chars import render_char_5x7, render_char_11x16
from .shapes import arrow, square, triangle

MENU_PROMPT = (
    "Select which shape you want to print "
    "(Triangle = t, Square = s, Chars = c, Arrow = a) or 'q' to quit\n> "
)
FONT_PROMPT = "Select which font you want to print (5x7 = 5, 11x16 = 1)\n>"
SAMPLE_CHARS = "abc"

_FONT_RENDERERS = {
    "5": render_char_5x7,
    "1": render_char_11x16,
}


def _characters(stream: TextIO) -> Iterator[str]:
    while char := stream.read(1):
        yield char


def _answer(chars: Iterator[str]) -> str | None:
    """Next character that is not a newline, or None at end of input."""
    return next((char for char in chars if char != "\n"), None)


def _ask(prompt: str, chars: Iterator[str], stdout: TextIO) -> str | None:
    stdout.write(prompt)
    stdout.flush()
    return _answer(chars)


def run(stdin: TextIO, stdout: TextIO) -> None:
    """Run the menu, reading choices from ``stdin`` until 'q' or end of input."""
    chars = _characters(stdin)
    stdout.write("Welcome!\n")
    while (choice := _ask(MENU_PROMPT, chars, stdout)) is not None:
        if choice == "t":
            stdout.write("You selected triangle:\n")
            stdout.write(triangle(5, 7))
        elif choice == "s":
            stdout.write("You selected square:\n")
            stdout.write(square(5, 5))
        elif choice == "c":
            stdout.write("You selected chars:\n")
            render = _FONT_RENDERERS.get(_ask(FONT_PROMPT, chars, stdout) or "")
            if render is not None:
                stdout.write("".join(render(char) for char in SAMPLE_CHARS))
        elif choice == "a":
            stdout.write("You selected arrow:\n")
            stdout.write(arrow(5, 8))
        elif choice == "q":
            stdout.write("Bye!\n")
            break
        else:
            stdout.write(f"Unrecognized option '{choice}', please try again!\n")
    stdout.flush()


def main(argv: list[str] | None = None) -> int:
    """Entry point of the asciidraw command."""
    parser = argparse.ArgumentParser(
        prog="asciidraw", description="Draw shapes and characters with stars."
    )
    parser.parse_args(argv)
    run(sys.stdin, sys.stdout)
    return 0