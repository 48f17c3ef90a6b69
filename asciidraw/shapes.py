"""Star pictures of simple shapes."""

from __future__ import annotations

_ARROW_ROWS = {
    0: "   *",
    1: "  *",
    2: " *",
    3: "* * * * *",
    4: " *",
    5: "  *",
    6: "   *",
}


def _row(start: int, stop: int) -> str:
    """A line with stars in columns ``start`` up to but not including ``stop``."""
    indent = max(0, start)
    return " " * indent + "*" * max(0, stop - indent) + "\n"


def square(left_col: int, size: int) -> str:
    """Return a ``size`` by ``size`` square whose left column is ``left_col``."""
    return "".join(_row(left_col, left_col + size) for _ in range(size))


def triangle(left_col: int, size: int) -> str:
    """Return a triangle of ``size + 1`` rows whose left edge is at ``left_col``."""
    apex = left_col + size
    return "".join(_row(apex - row, apex + row + 1) for row in range(size + 1))


def arrow(left_col: int, size: int) -> str:
    """Return a left-pointing arrow drawn over ``size + 1`` rows.

    The arrow has a fixed seven-row shape at the left margin; rows past it
    are empty and ``left_col`` does not move it.
    """
    return "".join(f"{_ARROW_ROWS.get(row, '')}\n" for row in range(size + 1))