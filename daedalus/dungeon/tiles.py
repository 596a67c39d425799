# Tile constants centralized for modular imports
from __future__ import annotations

from enum import Enum, IntEnum
from typing import NamedTuple


class TileKind(IntEnum):
    """Classification of one cell. Values are the raw export encoding."""

    WALL = 0
    FLOOR = 1
    ENTRANCE = 2
    EXIT = 3


class GenerationMethod(Enum):
    NAIVE = 0
    BSP = 1
    DRUNKEN_WALK = 2
    CELLULAR_AUTOMATA = 3
    VORONOI = 4
    PERLIN_NOISE = 5


class GenerationState(Enum):
    UNINITIALIZED = "uninitialized"  # all-wall grid, or endpoints missing
    GENERATING = "generating"
    GENERATED = "generated"  # entrance and exit both set
    VALIDATED = "validated"  # pathfinder confirmed entrance -> exit


class Coord(NamedTuple):
    row: int
    col: int


WALL = TileKind.WALL
FLOOR = TileKind.FLOOR
ENTRANCE = TileKind.ENTRANCE
EXIT = TileKind.EXIT

# to_ascii glyphs
GLYPHS = {WALL: "#", FLOOR: ".", ENTRANCE: "<", EXIT: ">"}

__all__ = [
    "TileKind",
    "GenerationMethod",
    "GenerationState",
    "Coord",
    "WALL",
    "FLOOR",
    "ENTRANCE",
    "EXIT",
    "GLYPHS",
]
