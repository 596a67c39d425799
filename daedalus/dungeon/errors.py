"""Exception taxonomy for grid access and generation.

A missing route between entrance and exit is not an error: the pathfinder
returns ``NO_PATH`` and ``Dungeon.find_path`` returns False.
"""

from __future__ import annotations


class DungeonError(Exception):
    """Base class for every error raised by the dungeon package."""


class InvalidDimension(DungeonError, ValueError):
    pass


class OutOfBounds(DungeonError, IndexError):
    def __init__(self, row: int, col: int, rows: int, cols: int):
        super().__init__(f"({row}, {col}) outside {rows}x{cols} grid")
        self.row = row
        self.col = col
        self.rows = rows
        self.cols = cols


class UnsupportedMethod(DungeonError):
    def __init__(self, method, variant: str):
        super().__init__(f"{variant} does not support generation method {method.name}")
        self.method = method
        self.variant = variant


class PathNotValidated(DungeonError):
    """hot_path() queried before find_path() confirmed a route."""


class GenerationError(DungeonError):
    """A strategy finished without leaving exactly one entrance and one exit."""


__all__ = [
    "DungeonError",
    "InvalidDimension",
    "OutOfBounds",
    "UnsupportedMethod",
    "PathNotValidated",
    "GenerationError",
]
