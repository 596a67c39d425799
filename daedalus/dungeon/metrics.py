from typing import Any, Dict

from .tiles import TileKind


def init_metrics() -> Dict[str, Any]:
    return {
        "method": None,
        "seed": None,
        "tiles_wall": 0,
        "tiles_floor": 0,
        "floor_ratio": 0.0,
        "path_length": None,
        "runtime_ms": 0.0,
        "phase_ms": {},
    }


def tile_counts(grid) -> Dict[str, Any]:
    """Wall/open counts; entrance and exit count as floor."""
    walls = sum(1 for _, t in grid.cells() if t == TileKind.WALL)
    total = len(grid)
    return {
        "tiles_wall": walls,
        "tiles_floor": total - walls,
        "floor_ratio": round((total - walls) / total, 4),
    }
