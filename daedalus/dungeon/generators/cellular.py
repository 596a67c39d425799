"""Cellular automata caves.

The interior starts as noise (WALL with probability ``ca_fill_probability``)
and is smoothed ``ca_generations`` times with the 4-5 rule over the
8-neighbourhood, counting anything outside the interior as wall:

    more than 4 wall neighbours  -> WALL
    fewer than 4 wall neighbours -> FLOOR
    exactly 4                    -> unchanged

Updates are computed from the previous generation (double buffered). The
pockets left behind are joined by ``merge_regions``.
"""

from __future__ import annotations

from ..connectivity import main_region, merge_regions
from ..rooms import interior
from ..tiles import FLOOR, WALL
from .common import place_endpoints

_RING = ((-1, -1), (-1, 0), (-1, 1), (0, -1), (0, 1), (1, -1), (1, 0), (1, 1))


def _wall_neighbours(grid, area, r: int, c: int) -> int:
    walls = 0
    for dr, dc in _RING:
        nr, nc = r + dr, c + dc
        if not area.contains(nr, nc) or grid.at(nr, nc) == WALL:
            walls += 1
    return walls


def smooth(grid, area) -> int:
    """Apply one generation of the 4-5 rule inside ``area``; returns cells changed."""
    updates = []
    for r, c in area.cells():
        n = _wall_neighbours(grid, area, r, c)
        if n > 4:
            new = WALL
        elif n < 4:
            new = FLOOR
        else:
            continue
        if grid.at(r, c) != new:
            updates.append((r, c, new))
    for r, c, new in updates:
        grid.set(r, c, new)
    return len(updates)


def generate_cellular_automata(dungeon, rng, config) -> dict:
    area = interior(dungeon.rows, dungeon.cols)
    grid = dungeon.tiles
    for r, c in area.cells():
        grid.set(r, c, WALL if rng.random() < config.ca_fill_probability else FLOOR)
    ran = 0
    while ran < config.ca_generations:
        ran += 1
        if not smooth(grid, area):
            break  # stable
    merged = merge_regions(grid, area)
    start = rng.choice(main_region(grid, area))
    place_endpoints(dungeon, start, area)
    return {"generations": ran, "regions": merged + 1, "regions_merged": merged}
