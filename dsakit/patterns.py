"""Text patterns drawn with stars and digits."""

from __future__ import annotations

__all__ = ["hollow_diamond", "butterfly", "hollow_square", "concentric_square"]


def _row(stars: int, spaces: int) -> str:
    return "*" * stars + " " * spaces + "*" * stars + "\n"


def hollow_diamond(n: int) -> str:
    """Return a diamond-shaped gap cut out of a 2n by 2n block of stars."""
    top = [_row(n - i, 2 * i) for i in range(n)]
    bottom = [_row(i, 2 * n - 2 * i) for i in range(1, n + 1)]
    return "".join(top + bottom)


def butterfly(n: int) -> str:
    """Return a butterfly of 2n - 1 rows, with wings widest in the middle row."""
    lines = []
    spaces = 2 * n - 2
    for i in range(1, 2 * n):
        stars = i if i <= n else 2 * n - i
        lines.append(_row(stars, spaces))
        spaces += -2 if i < n else 2
    return "".join(lines)


def hollow_square(n: int) -> str:
    """Return the outline of an n by n square, each cell three characters wide."""
    lines = []
    for i in range(n):
        border_row = i in (0, n - 1)
        cells = (
            " * " if border_row or j in (0, n - 1) else "   " for j in range(n)
        )
        lines.append("".join(cells) + "\n")
    return "".join(lines)


def concentric_square(n: int) -> str:
    """Return nested squares of digits from n at the edge down to 1 in the centre."""
    side = 2 * n - 1
    last = side - 1
    lines = []
    for i in range(side):
        row = "".join(
            str(n - min(i, last - i, j, last - j)) for j in range(side)
        )
        lines.append(row + "\n")
    return "".join(lines)