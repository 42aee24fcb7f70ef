"""The game's command: load a map, open a window and play."""

from __future__ import annotations

import sys
from os import PathLike
from pathlib import Path

import pygame

from solong.game import Game, GameOver, Key
from solong.mapfile import MapError, load_map
from solong.render import TILE_SIZE, Renderer, Textures
from solong.xpm import XpmError

__all__ = ["FRAME_DELAY_MS", "prepare_game", "run", "main"]

FRAME_DELAY_MS = 40
"""Pause between two frames."""

_TITLE = "so_long"
_USAGE = "Wrong number of arguments. Usage: solong <map.ber>"
_BAD_TYPE = 'Invalid file type. Must be: "<name>.ber"'


def prepare_game(path: str | PathLike[str]) -> Game:
    """Check the file name, then load and validate the map into a new game."""
    if ".ber" not in str(path):
        raise MapError(_BAD_TYPE)
    return Game(load_map(path))


def _keycode(key: int) -> int:
    return int(Key.ESC) if key == pygame.K_ESCAPE else key


def run(path: str | PathLike[str], assets_dir: str | PathLike[str] = "assets") -> str:
    """Play the map at ``path`` in a window; return why the game ended."""
    game = prepare_game(path)
    game_map = game.game_map
    pygame.display.init()
    pygame.font.init()
    try:
        screen = pygame.display.set_mode((game_map.cols * TILE_SIZE, game_map.rows * TILE_SIZE))
        pygame.display.set_caption(_TITLE)
        renderer = Renderer(screen, Textures.load(Path(assets_dir)))
        renderer.draw(game)
        pygame.display.flip()
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return "quit"
                if event.type == pygame.KEYDOWN:
                    game.handle_key(_keycode(event.key))
            game.tick()
            renderer.draw(game)
            pygame.display.flip()
            pygame.time.wait(FRAME_DELAY_MS)
    except GameOver as over:
        return over.reason
    finally:
        pygame.quit()


def main(argv: list[str] | None = None) -> int:
    """Run the game from the command line; return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        print(f"Error: {_USAGE}")
        return 1
    try:
        run(args[0])
    except (MapError, XpmError, OSError, pygame.error) as exc:
        print(f"Error: {exc}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())