import pytest

from asciidraw.shapes import arrow, square, triangle


@pytest.mark.parametrize("left,size", [(0, 1), (5, 5), (2, 7), (0, 3)])
def test_square_rows(left, size):
    lines = square(left, size).splitlines()
    assert len(lines) == size
    for line in lines:
        stars = line.lstrip(" ")
        assert len(line) - len(stars) == left
        assert stars == "*" * size


def test_square_empty():
    assert square(5, 0) == ""


def test_square_single():
    assert square(0, 1) == "*\n"


@pytest.mark.parametrize("left,size", [(5, 7), (0, 0), (3, 2), (0, 4)])
def test_triangle_rows(left, size):
    lines = triangle(left, size).splitlines()
    assert len(lines) == size + 1
    for row, line in enumerate(lines):
        stars = line.lstrip(" ")
        assert stars == "*" * (2 * row + 1)
        assert len(line) - len(stars) == left + size - row


def test_triangle_last_row_starts_at_left_col():
    last = triangle(5, 7).splitlines()[-1]
    assert last.index("*") == 5


def test_triangle_rows_are_symmetric():
    lines = triangle(1, 6).splitlines()
    centres = {line.index("*") + (len(line.strip()) - 1) / 2 for line in lines}
    assert centres == {7}


def test_arrow_default_shape():
    lines = arrow(5, 8).splitlines()
    assert lines == [
        "   *",
        "  *",
        " *",
        "* * * * *",
        " *",
        "  *",
        "   *",
        "",
        "",
    ]


def test_arrow_ignores_left_col():
    assert arrow(0, 8) == arrow(20, 8)


def test_arrow_short():
    assert arrow(5, 3).splitlines() == ["   *", "  *", " *", "* * * * *"]