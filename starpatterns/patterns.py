"""Text patterns of stars, numbers and letters, built row by row.

Every pattern function takes a size ``n`` and returns the rows as a list of
strings. Each cell is followed by a single space, and indentation uses two
spaces per missing cell (one space for :func:`star_diamond`). A size of zero
or less gives no rows.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

Pattern = Callable[[int], list[str]]


def _cells(items: Iterable[object]) -> str:
    return "".join(f"{item} " for item in items)


def _lower(index: int) -> str:
    return chr(ord("a") + index - 1)


def _upper(index: int) -> str:
    return chr(ord("A") + index - 1)


def _pad(count: int) -> str:
    return "  " * count


def square_of_tens(n: int) -> list[str]:
    """``n - 1`` rows of ``n`` tens."""
    return [_cells(["10"] * n) for _ in range(1, n)]


def row_numbers(n: int) -> list[str]:
    """An n-by-n square where every cell holds its row number."""
    return [_cells([row] * n) for row in range(1, n + 1)]


def descending_columns(n: int) -> list[str]:
    """An n-by-n square where every row counts down from ``n`` to 1."""
    return [_cells(range(n, 0, -1)) for _ in range(n)]


def squares(n: int) -> list[str]:
    """An n-by-n square where every row lists the squares of 1 to ``n``."""
    return [_cells(col * col for col in range(1, n + 1)) for _ in range(n)]


def row_letters(n: int) -> list[str]:
    """An n-by-n square where every cell holds its row's lower-case letter."""
    return [_cells([_lower(row)] * n) for row in range(1, n + 1)]


def row_letters_five(n: int) -> list[str]:
    """``n`` rows of five cells, each holding the row's lower-case letter."""
    return [_cells([_lower(row)] * 5) for row in range(1, n + 1)]


def counting_square(n: int) -> list[str]:
    """An n-by-n square filled with 1, 2, 3, ... row by row."""
    return [
        _cells(range(row * n + 1, row * n + n + 1)) for row in range(n)
    ] if n > 0 else []


def star_triangle(n: int) -> list[str]:
    """Row ``i`` holds ``i`` stars."""
    return [_cells(["*"] * row) for row in range(1, n + 1)]


def number_triangle(n: int) -> list[str]:
    """Row ``i`` counts from 1 up to ``i``."""
    return [_cells(range(1, row + 1)) for row in range(1, n + 1)]


def reverse_number_triangle(n: int) -> list[str]:
    """Row ``i`` counts from ``i`` down to 1."""
    return [_cells(range(row, 0, -1)) for row in range(1, n + 1)]


def letter_row_triangle(n: int) -> list[str]:
    """Row ``i`` holds the ``i``-th lower-case letter ``i`` times."""
    return [_cells([_lower(row)] * row) for row in range(1, n + 1)]


def letter_triangle(n: int) -> list[str]:
    """Row ``i`` holds the first ``i`` lower-case letters."""
    return [
        _cells(_lower(col) for col in range(1, row + 1))
        for row in range(1, n + 1)
    ]


def inverted_star_triangle(n: int) -> list[str]:
    """Row ``i`` holds ``n - i + 1`` stars."""
    return [_cells(["*"] * (n - row + 1)) for row in range(1, n + 1)]


def inverted_number_triangle(n: int) -> list[str]:
    """Row ``i`` counts from 1 up to ``n - i + 1``."""
    return [_cells(range(1, n - row + 2)) for row in range(1, n + 1)]


def descending_from_n_triangle(n: int) -> list[str]:
    """Row ``i`` counts down from ``n`` for ``i`` cells."""
    return [_cells(range(n, n - row, -1)) for row in range(1, n + 1)]


def right_star_triangle(n: int) -> list[str]:
    """A right-aligned triangle of stars."""
    return [_pad(n - row) + _cells(["*"] * row) for row in range(1, n + 1)]


def right_row_number_triangle(n: int) -> list[str]:
    """A right-aligned triangle where row ``i`` holds ``i`` copies of ``i``."""
    return [_pad(n - row) + _cells([row] * row) for row in range(1, n + 1)]


def right_number_triangle(n: int) -> list[str]:
    """A right-aligned triangle where row ``i`` counts from 1 to ``i``."""
    return [
        _pad(n - row) + _cells(range(1, row + 1)) for row in range(1, n + 1)
    ]


def right_letter_triangle(n: int) -> list[str]:
    """A right-aligned triangle where row ``i`` holds the first ``i`` capitals."""
    return [
        _pad(n - row) + _cells(_upper(col) for col in range(1, row + 1))
        for row in range(1, n + 1)
    ]


def right_reverse_number_triangle(n: int) -> list[str]:
    """A right-aligned triangle where row ``i`` counts from ``i`` down to 1."""
    return [
        _pad(n - row) + _cells(range(row, 0, -1)) for row in range(1, n + 1)
    ]


def star_pyramid(n: int) -> list[str]:
    """A centred pyramid; row ``i`` holds ``2i - 1`` stars."""
    return [
        _pad(n - row) + _cells(["*"] * (2 * row - 1)) for row in range(1, n + 1)
    ]


def number_palindrome_pyramid(n: int) -> list[str]:
    """A centred pyramid; row ``i`` counts up to ``i`` and back down to 1."""
    return [
        _pad(n - row)
        + _cells(range(1, row + 1))
        + _cells(range(row - 1, 0, -1))
        for row in range(1, n + 1)
    ]


def inverted_star_pyramid(n: int) -> list[str]:
    """An upside-down centred pyramid of stars."""
    return [
        _pad(row - 1) + _cells(["*"] * (2 * n - (2 * row - 1)))
        for row in range(1, n + 1)
    ]


def _wing_row(n: int, width: int) -> str:
    return _cells(["*"] * width) + _pad(2 * n - 2 * width) + _cells(["*"] * width)


def hollow_diamond(n: int) -> list[str]:
    """Two star wings narrowing towards a diamond-shaped hole and back."""
    top = [_wing_row(n, width) for width in range(n, 0, -1)]
    bottom = [_wing_row(n, width) for width in range(1, n + 1)]
    return top + bottom


def butterfly(n: int) -> list[str]:
    """Two star wings widening to a full row and narrowing again."""
    top = [_wing_row(n, width) for width in range(1, n + 1)]
    bottom = [_wing_row(n, width) for width in range(n - 1, 0, -1)]
    return top + bottom


def _diamond_row(n: int, width: int) -> str:
    return " " * (n - width) + _cells(["*"] * width)


def star_diamond(n: int) -> list[str]:
    """A diamond of stars whose widest row appears twice in the middle."""
    top = [_diamond_row(n, width) for width in range(1, n + 1)]
    bottom = [_diamond_row(n, width) for width in range(n, 0, -1)]
    return top + bottom


def letter_pyramid(n: int) -> list[str]:
    """A centred pyramid; row ``i`` holds the first ``2i - 1`` capitals."""
    return [
        _pad(n - row) + _cells(_upper(col) for col in range(1, 2 * row))
        for row in range(1, n + 1)
    ]


PATTERNS: dict[str, Pattern] = {
    func.__name__: func
    for func in (
        square_of_tens,
        row_numbers,
        descending_columns,
        squares,
        row_letters,
        row_letters_five,
        counting_square,
        star_triangle,
        number_triangle,
        reverse_number_triangle,
        letter_row_triangle,
        letter_triangle,
        inverted_star_triangle,
        inverted_number_triangle,
        descending_from_n_triangle,
        right_star_triangle,
        right_row_number_triangle,
        right_number_triangle,
        right_letter_triangle,
        right_reverse_number_triangle,
        star_pyramid,
        number_palindrome_pyramid,
        inverted_star_pyramid,
        hollow_diamond,
        butterfly,
        star_diamond,
        letter_pyramid,
    )
}


def get_pattern(name: str) -> Pattern:
    """Look up a pattern function by name; hyphens and case are ignored."""
    key = name.strip().lower().replace("-", "_")
    try:
        return PATTERNS[key]
    except KeyError:
        raise ValueError(f"unknown pattern: {name!r}") from None


def render(name: str, n: int) -> str:
    """Render the named pattern as text, each row ended by a newline."""
    return "".join(f"{line}\n" for line in get_pattern(name)(n))