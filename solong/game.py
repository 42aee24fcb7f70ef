"""Game state and player movement."""

from __future__ import annotations

import sys
from enum import Enum, IntEnum
from typing import TextIO

from solong.mapfile import BUG, COIN, EMPTY, EXIT, PLAYER, WALL, GameMap

__all__ = ["MOVE_CAP", "Key", "Direction", "GameOver", "Game"]

MOVE_CAP = 999
"""The move counter stops counting at this value."""

_BUG_MESSAGE = (
    "\nWatch out! That's a bug!\n"
    "Uh oh, looks like your code is infected\n"
    "----------------------------------------\n"
    "You're a loser, baby\n"
    "A loser, goddamn, baby\n"
    "You're a f*cked up little whiny b*tch\n"
    "You're a loser, just like me\n"
)
_WIN_MESSAGE = (
    "\nYou fell into the BlackHole!\n"
    "Enjoy the rest of your life in the void!\n"
)
_LOCKED_MESSAGE = "You need to collect all the coins first!\n"


class Key(IntEnum):
    """Key codes the game reacts to."""

    W = 119
    A = 97
    S = 115
    D = 100
    ESC = 65307


class Direction(Enum):
    """The way the player faces."""

    FRONT = 0
    BACK = 1
    LEFT = 2
    RIGHT = 3


_STEPS = {
    Direction.BACK: (-1, 0),
    Direction.LEFT: (0, -1),
    Direction.FRONT: (1, 0),
    Direction.RIGHT: (0, 1),
}

_KEY_DIRECTIONS = {
    Key.W: Direction.BACK,
    Key.A: Direction.LEFT,
    Key.S: Direction.FRONT,
    Key.D: Direction.RIGHT,
}


class GameOver(Exception):
    """Raised when the game ends; ``reason`` is "won", "bug" or "quit"."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class Game:
    """A running game on a validated map."""

    def __init__(self, game_map: GameMap, out: TextIO | None = None) -> None:
        self.game_map = game_map
        self.score = 0
        self.moves = 0
        self.frames = 0
        self.direction = Direction.FRONT
        self._out = out

    @property
    def coins(self) -> int:
        """Coins still to collect."""
        return self.game_map.coins

    @property
    def position(self) -> tuple[int, int]:
        return self.game_map.player

    def _say(self, text: str) -> None:
        (self._out if self._out is not None else sys.stdout).write(text)

    def handle_key(self, keycode: int) -> None:
        """React to a key press; unknown keys are ignored."""
        try:
            key = Key(keycode)
        except ValueError:
            return
        if key is Key.ESC:
            raise GameOver("quit")
        self.move(_KEY_DIRECTIONS[key])

    def move(self, direction: Direction) -> bool:
        """Face ``direction`` and step that way; return whether the player moved."""
        direction = Direction(direction)
        self.direction = direction
        d_row, d_col = _STEPS[direction]
        row, col = self.game_map.player
        target = (row + d_row, col + d_col)
        if self.game_map.tile(*target) == WALL:
            return False
        return self._step(*target)

    def _step(self, row: int, col: int) -> bool:
        grid = self.game_map.grid
        if grid[row][col] == EXIT and self.coins != 0:
            self._say(_LOCKED_MESSAGE)
            return False
        old_row, old_col = self.game_map.player
        grid[old_row][old_col] = EMPTY
        self.game_map.player = (row, col)
        self._arrive(grid[row][col])
        grid[row][col] = PLAYER
        if self.moves == MOVE_CAP:
            self._say("Capped moves")
            return True
        self.moves += 1
        self._say(f"Moves: {self.moves}\n")
        return True

    def _arrive(self, tile: str) -> None:
        if tile == COIN:
            self.game_map.coins -= 1
            self.score += 1
            self._say(f"Score: {self.score}\n")
        if tile == EXIT and self.coins == 0:
            self._say(_WIN_MESSAGE)
            raise GameOver("won")
        if tile == BUG:
            self._say(_BUG_MESSAGE)
            raise GameOver("bug")

    def tick(self) -> int:
        """Advance the animation by one frame and return the frame count."""
        self.frames += 1
        return self.frames