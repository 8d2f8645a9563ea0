"""Flood fill of the open area reachable from a starting tile."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator

from cubworld.grid import Grid

# Up, down, left, right: the order in which neighbours are visited.
_DIRECTIONS = ((0, -1), (0, 1), (-1, 0), (1, 0))


class Reachability:
    """The set of tiles reachable from a start tile.

    ``empty_spaces`` counts the reachable empty tiles found by the search,
    not counting the start tile; each removal of a reachable tile through
    ``forbid`` lowers it by one.
    """

    def __init__(self, width: int, height: int, start: tuple[int, int]) -> None:
        self.width = width
        self.height = height
        self.start = start
        self.empty_spaces = 0
        self._cells: set[tuple[int, int]] = {start}

    def _add(self, x: int, y: int) -> None:
        self._cells.add((x, y))
        self.empty_spaces += 1

    def is_reachable(self, x: int, y: int) -> bool:
        """Whether (x, y) is currently marked reachable."""
        return (x, y) in self._cells

    def forbid(self, x: int, y: int) -> bool:
        """Unmark (x, y); return True if it was reachable."""
        if (x, y) not in self._cells:
            return False
        self._cells.discard((x, y))
        self.empty_spaces -= 1
        return True

    def forbid_around(self, x: int, y: int, radius: int) -> int:
        """Unmark every tile in the square of the given radius around (x, y).

        Returns how many tiles were removed.
        """
        removed = 0
        for ny in range(y - radius, y + radius + 1):
            for nx in range(x - radius, x + radius + 1):
                if 0 <= nx < self.width and 0 <= ny < self.height and self.forbid(nx, ny):
                    removed += 1
        return removed

    def cells(self) -> Iterator[tuple[int, int]]:
        """Yield reachable tiles as (x, y) in row-major order."""
        return iter(sorted(self._cells, key=lambda cell: (cell[1], cell[0])))

    def __len__(self) -> int:
        return len(self._cells)

    def __contains__(self, cell: object) -> bool:
        return cell in self._cells


def explore(grid: Grid, start_x: int, start_y: int, empty: str) -> Reachability:
    """Breadth-first search over ``empty`` tiles from (start_x, start_y).

    The start tile is reachable whatever it holds; every other reachable tile
    holds ``empty`` and is joined to the start through edge neighbours.
    """
    if not grid.in_bounds(start_x, start_y):
        raise ValueError(f"start ({start_x}, {start_y}) is outside the map")
    reach = Reachability(grid.width, grid.height, (start_x, start_y))
    queue = deque([(start_x, start_y)])
    while queue:
        x, y = queue.popleft()
        for dx, dy in _DIRECTIONS:
            nx, ny = x + dx, y + dy
            if (
                grid.in_bounds(nx, ny)
                and grid.cell(nx, ny) == empty
                and not reach.is_reachable(nx, ny)
            ):
                reach._add(nx, ny)
                queue.append((nx, ny))
    return reach