"""Drawing of the map, the player and the score bar."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from os import PathLike
from pathlib import Path

import pygame

from solong.game import Direction, Game
from solong.mapfile import BUG, COIN, EMPTY, EXIT, PLAYER, WALL
from solong.xpm import TRANSPARENT, XpmImage, load_xpm

__all__ = [
    "TILE_SIZE",
    "TEXT_COLOR",
    "Sprite",
    "Textures",
    "Renderer",
    "tile_sprites",
    "hud_items",
]

TILE_SIZE = 64
"""Width and height of one map tile in pixels."""

TEXT_COLOR = (0, 0, 0)
_WALL_PERIOD = 8
_WALL_ALT_FRAME = 4
_FONT_SIZE = 18

Draw = tuple["Sprite", tuple[int, int]]
HudItem = tuple["Sprite | str", tuple[int, int]]


class Sprite(Enum):
    """Every image the game draws, named by its file in the assets directory."""

    GROUND = "ground.xpm"
    COIN = "computer.xpm"
    DOOR = "hole.xpm"
    WALL = "water1.xpm"
    WALL2 = "water2.xpm"
    PLAYER = "player.xpm"
    PLAYER_LEFT = "player_left.xpm"
    PLAYER_RIGHT = "player_right.xpm"
    PLAYER_BACK = "player_back.xpm"
    BUG = "bug.xpm"
    MOVES = "moves.xpm"


_PLAYER_SPRITES = {
    Direction.FRONT: Sprite.PLAYER,
    Direction.BACK: Sprite.PLAYER_BACK,
    Direction.LEFT: Sprite.PLAYER_LEFT,
    Direction.RIGHT: Sprite.PLAYER_RIGHT,
}

_OVERLAYS = {
    COIN: Sprite.COIN,
    EXIT: Sprite.DOOR,
    BUG: Sprite.BUG,
}


def _to_surface(image: XpmImage) -> pygame.Surface:
    data = bytearray()
    for row in image.rows:
        for value in row:
            if value == TRANSPARENT:
                data += b"\x00\x00\x00\x00"
            else:
                data += bytes(((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF, 0xFF))
    return pygame.image.frombuffer(bytes(data), (image.width, image.height), "RGBA").copy()


@dataclass(frozen=True)
class Textures:
    """The loaded image of every sprite."""

    images: Mapping[Sprite, pygame.Surface]

    def __getitem__(self, sprite: Sprite) -> pygame.Surface:
        return self.images[sprite]

    @classmethod
    def load(cls, assets_dir: str | PathLike[str] = "assets") -> Textures:
        """Load every sprite from the XPM files in ``assets_dir``."""
        base = Path(assets_dir)
        return cls({sprite: _to_surface(load_xpm(base / sprite.value)) for sprite in Sprite})


def _wall_sprite(frames: int) -> Sprite | None:
    phase = frames % _WALL_PERIOD
    if phase == 0:
        return Sprite.WALL
    if phase == _WALL_ALT_FRAME:
        return Sprite.WALL2
    return None


def tile_sprites(game: Game) -> list[Draw]:
    """Return the sprites of the map in drawing order, with their top-left corners."""
    draws: list[Draw] = []
    wall = _wall_sprite(game.frames)
    for row, line in enumerate(game.game_map.grid):
        for col, tile in enumerate(line):
            corner = (col * TILE_SIZE, row * TILE_SIZE)
            if tile == WALL:
                if wall is not None:
                    draws.append((wall, corner))
                continue
            if tile in (EMPTY, COIN, EXIT, PLAYER, BUG):
                draws.append((Sprite.GROUND, corner))
            if tile == PLAYER:
                draws.append((_PLAYER_SPRITES[game.direction], corner))
            elif tile in _OVERLAYS:
                draws.append((_OVERLAYS[tile], corner))
    return draws


def hud_items(game: Game) -> list[HudItem]:
    """Return the score bar: the counter image, then texts at their baselines."""
    rows = game.game_map.rows
    baseline = rows * TILE_SIZE - 10
    return [
        (Sprite.MOVES, (TILE_SIZE, (rows - 1) * TILE_SIZE + 32)),
        (str(game.moves), (TILE_SIZE + 40, baseline)),
        ("PROJECTS: ", (TILE_SIZE * 2, baseline)),
        ("PROJECTS: ", (TILE_SIZE * 2 + 1, baseline)),
        (str(game.score), (TILE_SIZE * 3 + 10, baseline)),
    ]


class Renderer:
    """Draws a game onto a surface."""

    def __init__(
        self,
        surface: pygame.Surface,
        textures: Textures,
        font: pygame.font.Font | None = None,
    ) -> None:
        self.surface = surface
        self.textures = textures
        if font is None:
            pygame.font.init()
            font = pygame.font.Font(None, _FONT_SIZE)
        self.font = font

    def draw(self, game: Game) -> None:
        """Draw the map and the score bar of ``game``."""
        for sprite, corner in tile_sprites(game):
            self.surface.blit(self.textures[sprite], corner)
        for item, (x, y) in hud_items(game):
            if isinstance(item, Sprite):
                self.surface.blit(self.textures[item], (x, y))
            else:
                text = self.font.render(item, True, TEXT_COLOR)
                self.surface.blit(text, (x, y - self.font.get_ascent()))