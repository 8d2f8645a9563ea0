"""Random placement of enemies and of the winning tile on a map."""

from __future__ import annotations

import random
from dataclasses import dataclass

from cubworld.grid import Grid, tile_of
from cubworld.reach import Reachability

EMPTY = "0"
WIN_BLOCK = "G"
ENEMY_DENSITY = 30


@dataclass
class Sprite:
    """A point-like object in pixel coordinates."""

    x: float
    y: float


def _centre(x: int, y: int, tile_size: float) -> Sprite:
    return Sprite(x * tile_size + tile_size / 2, y * tile_size + tile_size / 2)


def enemy_budget(reach: Reachability) -> int:
    """How many enemies a map with this much open space should get."""
    return reach.empty_spaces // ENEMY_DENSITY


def place_enemies(
    grid: Grid,
    reach: Reachability,
    count: int,
    rng: random.Random,
    tile_size: float,
    safe_radius: int,
) -> list[Sprite]:
    """Put up to ``count`` enemies on random reachable tiles.

    Tiles within ``safe_radius`` of the start are never used, and each tile
    holds at most one enemy. Used tiles are removed from ``reach``. Returns
    the enemies in placement order; there may be fewer than ``count`` when
    the map runs out of room.
    """
    start_x, start_y = reach.start
    reach.forbid_around(start_x, start_y, safe_radius)
    enemies: list[Sprite] = []
    while len(enemies) < count and reach.empty_spaces > 0:
        index = rng.randrange(reach.empty_spaces)
        candidates = list(reach.cells())
        if index >= len(candidates):
            continue
        x, y = candidates[index]
        reach.forbid(x, y)
        enemies.append(_centre(x, y, tile_size))
    return enemies


def place_win_tile(
    grid: Grid, reach: Reachability, rng: random.Random, tile_size: float
) -> Sprite | None:
    """Turn a random reachable empty tile into the winning tile.

    Returns the sprite marking the tile's centre, or None when the map has
    no room for one.
    """
    if reach.empty_spaces <= 1:
        return None
    index = rng.randrange(reach.empty_spaces)
    candidates = [
        (x, y)
        for x, y in reach.cells()
        if grid.cell(x, y) == EMPTY and (x, y) != reach.start
    ]
    if index >= len(candidates):
        return None
    x, y = candidates[index]
    grid.set_cell(x, y, WIN_BLOCK)
    return _centre(x, y, tile_size)


def is_on_win(grid: Grid, px: float, py: float, tile_size: float) -> bool:
    """Whether the pixel position (px, py) lies on the winning tile."""
    x, y = tile_of(px, py, tile_size)
    return grid.in_bounds(x, y) and grid.cell(x, y) == WIN_BLOCK