# asciidraw

A small interactive terminal program that prints shapes and bitmap-font
characters as ASCII art made of `*`.

## Installation

```
pip install .
```

## Interactive use

```
asciidraw
```

The command takes no options other than `--help`. When it starts, it prints
`Welcome!` and then asks which shape to draw:

- `t`: a triangle
- `s`: a square
- `a`: an arrow
- `c`: characters. You then choose a font: `5` for the 5x7 font or `1` for
  the 11x16 font. The program prints the letters `a`, `b` and `c`. Any other
  answer prints nothing and returns to the menu.
- `q`: quit

Any other answer prints `Unrecognized option '<x>', please try again!`.
Newlines are skipped. The program also exits at end of input.

## Library use

The drawing functions return strings. You can use them without the
interactive loop:

```python
from asciidraw.shapes import square, triangle, arrow
from asciidraw.chars import render_char_5x7, render_char_11x16, render_char_8x12

print(square(5, 5), end="")
print(triangle(5, 7), end="")
print(render_char_5x7("a"), end="")
```

- `square(left_col, size)`: `size` rows of `size` stars, indented by
  `left_col` spaces.
- `triangle(left_col, size)`: `size + 1` rows. Each row is two stars wider
  than the one above. The apex is at column `left_col + size`.
- `arrow(left_col, size)`: a fixed seven-row left-pointing arrow at the left
  margin, drawn over `size + 1` lines. Lines past the seventh are empty, and
  `left_col` does not move the arrow.

The character renderers draw each strip of a glyph on one line, with the most
significant bit first, and end with a blank line. In the 5x7 and 11x16 fonts
a strip is a column of the glyph, so those characters come out rotated. In
the 8x12 font a strip is a row, so those characters come out upright. The
8x12 font can only be used from the library. The interactive menu does not
offer it.

The bitmap tables are in `asciidraw.fonts` as the `Font` objects `FONT_5X7`,
`FONT_11X16` and `FONT_8X12`. The fonts behave as follows:

- `Font.glyph(char)` returns the strips of a single character. It raises
  `TypeError` if the argument is not a one-character string, and
  `ValueError` if the font has no glyph for it.
- `char in font` checks whether the font covers a character.
- `font.last` is the code of the last character the font covers.

To drive the interactive session from your own streams, use
`asciidraw.cli.run(stdin, stdout)`.

## Running the tests

```
pip install .[test]
pytest
```