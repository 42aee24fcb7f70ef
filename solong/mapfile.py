"""Reading and validation of ``.ber`` map files."""

from __future__ import annotations

import re
from dataclasses import dataclass
from os import PathLike
from pathlib import Path

__all__ = [
    "WALL",
    "EMPTY",
    "COIN",
    "EXIT",
    "PLAYER",
    "BUG",
    "MapError",
    "GameMap",
    "read_map_lines",
    "validate_map",
    "check_reachable",
    "load_map",
]

WALL = "1"
EMPTY = "0"
COIN = "C"
EXIT = "E"
PLAYER = "P"
BUG = "B"

_INVALID = "Invalid map."
_NOT_FOUND = "No map found."
_LINE = re.compile(r"[^\n]*\n|[^\n]+")
_MIN_SIDE = 3


class MapError(ValueError):
    """Raised when a map file is missing or not a playable map."""


@dataclass
class GameMap:
    """A validated map: its tiles, the player's position and the coins left."""

    grid: list[list[str]]
    player: tuple[int, int]
    coins: int

    @property
    def rows(self) -> int:
        return len(self.grid)

    @property
    def cols(self) -> int:
        return len(self.grid[0]) if self.grid else 0

    def tile(self, row: int, col: int) -> str:
        """Return the tile at ``row`` and ``col``."""
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError(f"tile ({row}, {col}) outside {self.rows}x{self.cols} map")
        return self.grid[row][col]

    def copy(self) -> GameMap:
        """Return an independent copy of this map."""
        return GameMap([row[:] for row in self.grid], self.player, self.coins)


def read_map_lines(path: str | PathLike[str]) -> list[str]:
    """Read a map file into lines, each keeping its trailing newline."""
    try:
        text = Path(path).read_text(encoding="latin-1")
    except OSError:
        raise MapError(_NOT_FOUND) from None
    lines = _LINE.findall(text)
    if not lines:
        raise MapError(_INVALID)
    return lines


def _char(line: str, col: int) -> str:
    return line[col] if 0 <= col < len(line) else ""


def _check_closed(lines: list[str], cols: int) -> None:
    last = len(lines) - 1
    for index, line in enumerate(lines):
        if index in (0, last):
            columns: tuple[int, ...] | range = range(cols)
        else:
            columns = (0, cols - 1) if cols > 0 else ()
        if any(_char(line, col) != WALL for col in columns):
            raise MapError(_INVALID)


def _check_last_row(lines: list[str], cols: int) -> None:
    last = lines[-1]
    if any(_char(last, col) != WALL for col in range(cols)):
        raise MapError(_INVALID)
    if _char(last, cols) not in ("", "\n"):
        raise MapError(_INVALID)


def _check_rect(lines: list[str], cols: int) -> None:
    if any(len(line) - 1 != cols for line in lines[:-1]):
        raise MapError(_INVALID)
    rows = len(lines)
    if cols < _MIN_SIDE or rows < _MIN_SIDE or cols == rows:
        raise MapError(_INVALID)


def validate_map(lines: list[str]) -> GameMap:
    """Check that ``lines`` form a closed, rectangular, playable map."""
    lines = list(lines)
    if not lines:
        raise MapError(_INVALID)
    cols = len(lines[0]) - 1
    _check_closed(lines, cols)
    _check_last_row(lines, cols)
    _check_rect(lines, cols)

    players = exits = coins = 0
    player = (0, 0)
    for row, line in enumerate(lines):
        for col, tile in enumerate(line[:cols]):
            if tile == PLAYER:
                player = (row, col)
                players += 1
            elif tile == EXIT:
                exits += 1
            elif tile == COIN:
                coins += 1
            elif tile not in (WALL, EMPTY, BUG):
                raise MapError(_INVALID)
    if exits != 1 or coins < 1 or players != 1:
        raise MapError(_INVALID)
    return GameMap([list(line[:cols]) for line in lines], player, coins)


def check_reachable(game_map: GameMap) -> frozenset[tuple[int, int]]:
    """Return the cells the player can reach; every coin and the exit must be among them."""
    reached: set[tuple[int, int]] = set()
    pending = [game_map.player]
    while pending:
        row, col = pending.pop()
        if (row, col) in reached or game_map.tile(row, col) in (WALL, BUG):
            continue
        reached.add((row, col))
        pending.extend(((row - 1, col), (row + 1, col), (row, col - 1), (row, col + 1)))
    for row, line in enumerate(game_map.grid):
        for col, tile in enumerate(line):
            if tile in (COIN, EXIT) and (row, col) not in reached:
                raise MapError(_INVALID)
    return frozenset(reached)


def load_map(path: str | PathLike[str]) -> GameMap:
    """Read, validate and check a map file."""
    game_map = validate_map(read_map_lines(path))
    check_reachable(game_map)
    return game_map