"""Helpers shared by the carving strategies."""

from __future__ import annotations

from typing import Tuple

from ..connectivity import farthest_cell
from ..rooms import Rect
from ..tiles import FLOOR, WALL, Coord


def carve(grid, row: int, col: int) -> bool:
    """Turn a WALL into FLOOR; returns True if the cell changed."""
    if grid.at(row, col) == WALL:
        grid.set(row, col, FLOOR)
        return True
    return False


def carve_line(grid, a: Coord, b: Coord) -> int:
    """Carve a straight horizontal or vertical run from ``a`` to ``b`` inclusive."""
    (r1, c1), (r2, c2) = a, b
    carved = 0
    if r1 == r2:
        step = 1 if c2 >= c1 else -1
        for c in range(c1, c2 + step, step):
            carved += carve(grid, r1, c)
    elif c1 == c2:
        step = 1 if r2 >= r1 else -1
        for r in range(r1, r2 + step, step):
            carved += carve(grid, r, c1)
    else:
        raise ValueError(f"carve_line needs an axis-aligned pair, got {a} -> {b}")
    return carved


def carve_l_corridor(grid, a: Coord, b: Coord, rng) -> int:
    """L-shaped corridor between two cells; the bend side is picked by ``rng``."""
    a, b = Coord(*a), Coord(*b)
    if rng.random() < 0.5:
        bend = Coord(a.row, b.col)  # horizontal first
    else:
        bend = Coord(b.row, a.col)  # vertical first
    return carve_line(grid, a, bend) + carve_line(grid, bend, b)


def _open_neighbor(grid, cell: Coord, area: Rect) -> Coord:
    candidates = [
        Coord(cell.row + dr, cell.col + dc)
        for dr, dc in ((-1, 0), (1, 0), (0, -1), (0, 1))
        if grid.in_bounds(cell.row + dr, cell.col + dc)
    ]
    inside = [c for c in candidates if area.contains(*c)]
    pick = (inside or candidates)[0]
    grid.set(pick.row, pick.col, FLOOR)
    return pick


def place_endpoints(dungeon, start, area: Rect) -> Tuple[Coord, Coord]:
    """Entrance at ``start``, exit at the open cell farthest from it.

    A lone open cell gets one neighbour carved so entrance and exit can differ.
    """
    grid = dungeon.tiles
    start = Coord(*start)
    carve(grid, *start)
    exit_cell = farthest_cell(grid, start)
    if exit_cell == start:
        exit_cell = _open_neighbor(grid, start, area)
    dungeon.set_entrance(*start)
    dungeon.set_exit(*exit_cell)
    return start, exit_cell


__all__ = ["carve", "carve_line", "carve_l_corridor", "place_endpoints"]
