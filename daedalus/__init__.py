"""
project: Daedalus
module: __init__.py
License: MIT

Roguelike dungeon maps: a dense tile grid, six procedural generation
strategies and a Dijkstra solver that validates entrance-to-exit
connectivity. Rendering and game-loop integration live with the caller;
``Dungeon.export_tiles`` is the hand-off point.
"""

from .config import GenerationConfig
from .dungeon import (
    Coord,
    Dungeon,
    DungeonError,
    GenerationMethod,
    GenerationState,
    InvalidDimension,
    OutOfBounds,
    PathNotValidated,
    RogueDungeon,
    TileKind,
    UnsupportedMethod,
    new_dungeon,
)  # noqa: F401

__version__ = "0.1.0"

__all__ = [
    "GenerationConfig",
    "Coord",
    "Dungeon",
    "DungeonError",
    "GenerationMethod",
    "GenerationState",
    "InvalidDimension",
    "OutOfBounds",
    "PathNotValidated",
    "RogueDungeon",
    "TileKind",
    "UnsupportedMethod",
    "new_dungeon",
]
