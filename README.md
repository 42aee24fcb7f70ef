# solong

A small top-down puzzle game played on a tile map, drawn with pygame.
Walk around the map, pick up every coin, then step into the exit.
Stepping onto a bug ends the game.

## Installing

```
pip install .
```

## Playing

```
solong maps/level.ber
```

The map file name must contain `.ber`. Move with `W`, `A`, `S` and `D`;
quit with `Esc` or by closing the window. The exit stays shut until every
coin has been collected. The number of moves and the score are printed to
standard output as you play and shown in a bar at the bottom of the window;
the move counter stops at 999.

Sprites are read as XPM images from an `assets` directory in the current
working directory. It must hold these files:

```
ground.xpm  computer.xpm  hole.xpm  water1.xpm  water2.xpm
player.xpm  player_left.xpm  player_right.xpm  player_back.xpm
bug.xpm  moves.xpm
```

On any error the command prints `Error: <message>` and exits with status 1.

## Map format

A map is a rectangle of text made of these characters:

| Char | Meaning          |
|------|------------------|
| `1`  | wall             |
| `0`  | floor            |
| `P`  | player start     |
| `C`  | coin             |
| `E`  | exit             |
| `B`  | bug (game over)  |

A map is accepted only when:

- it is surrounded by walls,
- every row has the same length,
- it is at least 3×3 and is not square,
- it has exactly one player, exactly one exit and at least one coin,
- the player can reach every coin and the exit without crossing a wall or a bug.

A map breaking any of these rules is refused with `Error: Invalid map.`;
a file that cannot be read gives `Error: No map found.`

Example:

```
1111111
1P0C0E1
1111111
```

## Using it as a library

```python
from solong.mapfile import load_map, MapError
from solong.game import Game, Direction, GameOver

game_map = load_map("maps/level.ber")   # raises MapError on a bad map
game = Game(game_map)
try:
    game.move(Direction.RIGHT)          # returns whether the player moved
except GameOver as over:
    print(over.reason)                  # "won", "bug" or "quit"
```

- `solong.mapfile` reads and checks maps (`read_map_lines`, `validate_map`,
  `check_reachable`, `load_map`, `GameMap`, `MapError`).
- `solong.game` holds the game state and rules (`Game` with `handle_key`,
  `move` and `tick`; `Key`, `Direction`, `GameOver`).
- `solong.xpm` parses XPM images (`parse_xpm`, `parse_xpm_text`, `load_xpm`,
  `split_words`, `find_unquoted`, `strip_comments`, `quoted_lines`,
  `XpmImage`, `XpmError`).
- `solong.colors` knows the X11 colour names (`lookup_color`,
  `color_from_text`, `mask_shifts`, `good_color`, `COLOR_TABLE`).
- `solong.render` draws a game with pygame (`Renderer`, `Textures`,
  `Sprite`, `tile_sprites`, `hud_items`).
- `solong.app` ties it together (`prepare_game`, `run`, `main`).

## Running the tests

```
pip install .[test]
pytest
```