"""Rectangular tile maps and conversions between pixel and tile coordinates."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

PAD_CHAR = " "


def tile_of(px: float, py: float, tile_size: float) -> tuple[int, int]:
    """Return the (x, y) tile that contains the pixel position (px, py)."""
    if tile_size <= 0:
        raise ValueError("tile_size must be positive")
    return int(px / tile_size), int(py / tile_size)


class Grid:
    """A mutable rectangular map of single-character cells.

    Shorter rows are padded on the right with spaces so every row has the
    same width.
    """

    def __init__(self, rows: Iterable[str | Iterable[str]]) -> None:
        cells = [list(row) for row in rows]
        for row in cells:
            for value in row:
                _check_value(value)
        width = max((len(row) for row in cells), default=0)
        for row in cells:
            row.extend(PAD_CHAR * (width - len(row)))
        self._cells = cells
        self._width = width

    @property
    def width(self) -> int:
        """Number of columns."""
        return self._width

    @property
    def height(self) -> int:
        """Number of rows."""
        return len(self._cells)

    @property
    def lines(self) -> tuple[str, ...]:
        """The rows as strings, top to bottom."""
        return tuple("".join(row) for row in self._cells)

    def in_bounds(self, x: int, y: int) -> bool:
        """Whether (x, y) lies inside the map."""
        return 0 <= x < self._width and 0 <= y < len(self._cells)

    def cell(self, x: int, y: int) -> str:
        """Return the character at column x, row y."""
        self._require(x, y)
        return self._cells[y][x]

    def set_cell(self, x: int, y: int, value: str) -> None:
        """Replace the character at column x, row y."""
        _check_value(value)
        self._require(x, y)
        self._cells[y][x] = value

    def copy(self) -> Grid:
        """Return an independent copy of this map."""
        return Grid(self.lines)

    def upscale(self, factor: int) -> Grid:
        """Return a map where every cell becomes a factor-by-factor block."""
        if not isinstance(factor, int) or factor < 1:
            raise ValueError("factor must be a positive integer")
        rows: list[str] = []
        for line in self.lines:
            wide = "".join(ch * factor for ch in line)
            rows.extend([wide] * factor)
        return Grid(rows)

    def _require(self, x: int, y: int) -> None:
        if not self.in_bounds(x, y):
            raise IndexError(f"cell ({x}, {y}) is outside a {self._width}x{self.height} map")

    def __iter__(self) -> Iterator[str]:
        return iter(self.lines)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.lines == other.lines

    def __str__(self) -> str:
        return "\n".join(self.lines)

    def __repr__(self) -> str:
        return f"Grid({list(self.lines)!r})"


def _check_value(value: object) -> None:
    if not isinstance(value, str) or len(value) != 1:
        raise ValueError(f"cell value must be a single character, got {value!r}")