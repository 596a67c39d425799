"""Public dungeon package interface."""

from .dungeon import Dungeon, RogueDungeon, new_dungeon
from .errors import (
    DungeonError,
    GenerationError,
    InvalidDimension,
    OutOfBounds,
    PathNotValidated,
    UnsupportedMethod,
)
from .grid import Grid2D
from .pathfinding import NO_PATH, PathResult, shortest_path
from .rooms import Rect, Room
from .tiles import (
    ENTRANCE,
    EXIT,
    FLOOR,
    WALL,
    Coord,
    GenerationMethod,
    GenerationState,
    TileKind,
)  # noqa: F401

__all__ = [
    "Dungeon",
    "RogueDungeon",
    "new_dungeon",
    "DungeonError",
    "GenerationError",
    "InvalidDimension",
    "OutOfBounds",
    "PathNotValidated",
    "UnsupportedMethod",
    "Grid2D",
    "NO_PATH",
    "PathResult",
    "shortest_path",
    "Rect",
    "Room",
    "Coord",
    "GenerationMethod",
    "GenerationState",
    "TileKind",
    "WALL",
    "FLOOR",
    "ENTRANCE",
    "EXIT",
]
