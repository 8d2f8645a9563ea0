import random

import pytest

from cubworld.grid import Grid
from cubworld.placement import (
    EMPTY,
    WIN_BLOCK,
    Sprite,
    enemy_budget,
    is_on_win,
    place_enemies,
    place_win_tile,
)
from cubworld.reach import explore


def corridor(n):
    return Grid(["N" + EMPTY * n])


def room(width, height):
    rows = ["1" * (width + 2)]
    rows += ["1" + EMPTY * width + "1" for _ in range(height)]
    rows.append("1" * (width + 2))
    return Grid(rows)


def test_enemy_budget_sixty_spaces():
    reach = explore(corridor(60), 0, 0, EMPTY)
    assert enemy_budget(reach) == 2


def test_enemy_budget_small_map_is_zero():
    reach = explore(corridor(29), 0, 0, EMPTY)
    assert enemy_budget(reach) == 0


def test_place_enemies_respects_count_and_safety():
    grid = room(20, 12)
    reach = explore(grid, 1, 1, EMPTY)
    enemies = place_enemies(grid, reach, 4, random.Random(3), 32, 5)
    assert len(enemies) == 4
    tiles = {(int(s.x // 32), int(s.y // 32)) for s in enemies}
    assert len(tiles) == 4
    for x, y in tiles:
        assert grid.cell(x, y) == EMPTY
        assert max(abs(x - 1), abs(y - 1)) > 5
        assert not reach.is_reachable(x, y)


def test_place_enemies_is_deterministic_for_seed():
    a = place_enemies(room(15, 10), explore(room(15, 10), 1, 1, EMPTY), 3, random.Random(9), 32, 2)
    b = place_enemies(room(15, 10), explore(room(15, 10), 1, 1, EMPTY), 3, random.Random(9), 32, 2)
    assert a == b


def test_place_enemies_zero_count():
    grid = corridor(20)
    reach = explore(grid, 0, 0, EMPTY)
    assert place_enemies(grid, reach, 0, random.Random(0), 32, 1) == []


def test_place_win_tile_marks_one_tile():
    grid = corridor(3)
    reach = explore(grid, 0, 0, EMPTY)
    sprite = place_win_tile(grid, reach, random.Random(5), 32)
    wins = [x for x in range(grid.width) if grid.cell(x, 0) == WIN_BLOCK]
    assert len(wins) == 1
    assert wins[0] >= 1
    assert sprite == Sprite(wins[0] * 32 + 16, 16)


def test_place_win_tile_needs_room():
    grid = corridor(1)
    reach = explore(grid, 0, 0, EMPTY)
    assert place_win_tile(grid, reach, random.Random(0), 32) is None
    assert grid == corridor(1)


def test_is_on_win():
    grid = Grid(["0" + WIN_BLOCK])
    assert is_on_win(grid, 40.0, 10.0, 32)
    assert not is_on_win(grid, 10.0, 10.0, 32)
    assert not is_on_win(grid, 500.0, 10.0, 32)


def test_is_on_win_rejects_bad_tile_size():
    with pytest.raises(ValueError):
        is_on_win(Grid(["0"]), 1.0, 1.0, 0)