# cubworld

The world model for a small tile-based maze game that you play in first person. Enemies are placed on the open floor of the maze. One hidden tile wins the round when the player stands on it.

cubworld uses only the standard library.

## What it provides

- `cubworld.grid`
  - `Grid` is a mutable rectangular map of single-character cells. Shorter rows are padded with spaces.
  - `width`, `height` and `lines` describe the map.
  - `cell`, `set_cell` and `in_bounds` read and write cells. Both `cell` and `set_cell` raise `IndexError` outside the map.
  - `copy` returns an independent copy.
  - `upscale(factor)` turns every cell into a `factor × factor` block.
  - `tile_of(px, py, tile_size)` converts a pixel position to tile coordinates.
- `cubworld.reach`
  - `explore(grid, start_x, start_y, empty)` runs a breadth-first search over `empty` tiles, starting from the start tile. It returns a `Reachability`.
  - A `Reachability` answers `is_reachable`. It yields its tiles in row-major order through `cells()`.
  - It can drop tiles one at a time with `forbid`, or in a square around a point with `forbid_around`.
  - `empty_spaces` counts the reachable empty tiles, not counting the start tile.
- `cubworld.framebuffer`
  - `FrameBuffer` is an in-memory image of 32-bit colours.
  - It has `put_pixel`, `get_pixel`, `fill`, and `to_bytes`, which returns little-endian words row by row.
- `cubworld.placement`
  - `enemy_budget(reach)` gives one enemy per 30 open tiles.
  - `place_enemies(...)` puts enemies (`Sprite`) on random reachable tiles. It keeps them outside a safe square around the start and puts at most one enemy on a tile.
  - `place_win_tile(...)` turns a random reachable empty tile into the winning tile `"G"`. It returns `None` when there is no room.
  - `is_on_win(...)` tells whether a pixel position lies on the winning tile.
- `cubworld.game`
  - `Game(rows, start_x, start_y, rng=None)` builds a round. It places the player (`Player`), the enemies and the winning tile, and it keeps copies of the map and the enemies.
  - `minimap_offset(minimap_tiles)` gives the top-left tile of a minimap centred on the player.
  - `check_win()`, `lose()` and `request_retry()` change the `GameState`.
  - `retry()` restores the starting map, the player and the enemies.
  - `tick()` performs a pending retry, or checks for a win while the game is being played.

## Example

```python
import random

from cubworld.game import Game, GameState

rows = [
    "111111",
    "100001",
    "101101",
    "100001",
    "111111",
]
game = Game(rows, start_x=1, start_y=1, rng=random.Random(7))

if game.tick() is GameState.WIN:
    print("found the exit")

game.lose()
game.request_retry()
game.tick()  # restores the map, the player and the enemies
print(game.state)  # GameState.NOSTATE
```

## What it does not do

cubworld has no window, no input handling, no raycasting and no texture loading. It also does not move the player or the enemies. It provides no command to run. A program that shows the game has to draw the world itself and move the player by changing `game.player`.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install .[test]
```

## Running the tests

```
pytest
```