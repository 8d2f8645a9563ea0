"""Game world setup, win and lose states, and restarting a round."""

from __future__ import annotations

import enum
import math
import random
from collections.abc import Iterable
from dataclasses import dataclass, replace

from cubworld.grid import Grid, tile_of
from cubworld.placement import (
    EMPTY,
    Sprite,
    enemy_budget,
    is_on_win,
    place_enemies,
    place_win_tile,
)
from cubworld.reach import explore

TILE_SIZE = 32
BIG_MAP_FACTOR = 4
SAFE_RADIUS = 5
START_ANGLE = math.pi / 2


class GameState(enum.Enum):
    """The phase the game is in."""

    NOSTATE = "playing"
    WIN = "win"
    LOSE = "lose"
    RETRY = "retry"


@dataclass
class Player:
    """Player position in pixels and viewing angle in radians."""

    px: float
    py: float
    pa: float = START_ANGLE

    @property
    def pdx(self) -> float:
        """X component of the viewing direction."""
        return math.cos(self.pa)

    @property
    def pdy(self) -> float:
        """Y component of the viewing direction."""
        return math.sin(self.pa)


class Game:
    """A round of the game on one map."""

    def __init__(
        self,
        rows: Iterable[str],
        start_x: int,
        start_y: int,
        rng: random.Random | None = None,
    ) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.grid = Grid(rows)
        self.start = (start_x, start_y)
        self.state = GameState.NOSTATE
        self.player = self._new_player()

        reach = explore(self.grid, start_x, start_y, EMPTY)
        budget = enemy_budget(reach)
        self.enemies = place_enemies(
            self.grid, reach, budget, self.rng, TILE_SIZE, SAFE_RADIUS
        )
        self.saved_enemies = [replace(s) for s in self.enemies]

        win_reach = explore(self.grid, start_x, start_y, EMPTY)
        self.win_sprite: Sprite | None = place_win_tile(
            self.grid, win_reach, self.rng, TILE_SIZE
        )

        self.saved_grid = self.grid.copy()
        self.big_grid = self.grid.upscale(BIG_MAP_FACTOR)

    def _new_player(self) -> Player:
        x, y = self.start
        return Player(x * TILE_SIZE + TILE_SIZE / 2, y * TILE_SIZE + TILE_SIZE / 2)

    def minimap_offset(self, minimap_tiles: int) -> tuple[int, int]:
        """Top-left tile of a minimap of the given size centred on the player."""
        x, y = tile_of(self.player.px, self.player.py, TILE_SIZE)
        half = minimap_tiles // 2
        return x - half, y - half

    def check_win(self) -> bool:
        """Enter the win state if the player stands on the winning tile."""
        if is_on_win(self.grid, self.player.px, self.player.py, TILE_SIZE):
            self.state = GameState.WIN
            return True
        return False

    def lose(self) -> None:
        """Enter the lose state."""
        self.state = GameState.LOSE

    def request_retry(self) -> None:
        """Ask for the round to be restarted on the next tick."""
        self.state = GameState.RETRY

    def retry(self) -> None:
        """Restore the map, player and enemies to how the round began."""
        self.grid = self.saved_grid.copy()
        self.big_grid = self.grid.upscale(BIG_MAP_FACTOR)
        self.player = self._new_player()
        self.enemies = [replace(s) for s in self.saved_enemies]
        self.state = GameState.NOSTATE

    def tick(self) -> GameState:
        """Advance one frame and return the resulting state."""
        if self.state is GameState.RETRY:
            self.retry()
        elif self.state is GameState.NOSTATE:
            self.check_win()
        return self.state