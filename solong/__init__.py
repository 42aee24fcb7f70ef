"""Tile-based puzzle game: collect every coin, then reach the exit."""

__version__ = "1.0.0"

__all__ = ["app", "colors", "game", "mapfile", "render", "xpm"]