"""Connectivity utilities: flood fill, region labelling and region merging.

Cave-like strategies (cellular automata, Perlin noise, Voronoi) can leave
several disconnected pockets of floor. The policy here is *merge*: the
largest pocket is kept as the main region and every other pocket is joined
to it by carving the shortest corridor through the walls between them.
Nothing is discarded, so the layout keeps all the open space it rolled.
"""

from __future__ import annotations

from collections import deque
from typing import Dict, List, Optional, Set

from .grid import Grid2D
from .rooms import Rect
from .tiles import FLOOR, WALL, Coord

_STEPS = ((-1, 0), (1, 0), (0, -1), (0, 1))


def is_open(tile) -> bool:
    return tile != WALL


def flood_distances(grid: Grid2D, start, area: Optional[Rect] = None) -> Dict[Coord, int]:
    """BFS step distances from ``start`` over open cells (insertion ordered)."""
    start = Coord(*start)
    if not is_open(grid.at(*start)):
        return {}
    seen = {start: 0}
    q = deque([start])
    while q:
        cur = q.popleft()
        r, c = cur
        for dr, dc in _STEPS:
            nr, nc = r + dr, c + dc
            if not grid.in_bounds(nr, nc) or (nr, nc) in seen:
                continue
            if area is not None and not area.contains(nr, nc):
                continue
            if is_open(grid.at(nr, nc)):
                seen[Coord(nr, nc)] = seen[cur] + 1
                q.append(Coord(nr, nc))
    return seen


def farthest_cell(grid: Grid2D, start, area: Optional[Rect] = None) -> Coord:
    """Open cell with the greatest BFS distance from ``start``; first found wins ties."""
    dist = flood_distances(grid, start, area)
    best, best_d = Coord(*start), 0
    for cell, d in dist.items():
        if d > best_d:
            best, best_d = cell, d
    return best


def label_regions(grid: Grid2D, area: Rect) -> List[List[Coord]]:
    """4-connected open regions inside ``area``, discovered in row-major order."""
    regions: List[List[Coord]] = []
    seen: Set[Coord] = set()
    for cell in area.cells():
        if cell in seen or not is_open(grid.at(*cell)):
            continue
        region = list(flood_distances(grid, cell, area))
        seen.update(region)
        regions.append(region)
    return regions


def _carve_link(grid: Grid2D, sources: List[Coord], targets: Set[Coord], area: Rect) -> List[Coord]:
    """Multi-source BFS through any cell of ``area`` to the nearest target; carve the walls on the way."""
    parent: Dict[Coord, Optional[Coord]] = {s: None for s in sources}
    q = deque(sources)
    hit = None
    while q:
        cur = q.popleft()
        if cur in targets:
            hit = cur
            break
        r, c = cur
        for dr, dc in _STEPS:
            nxt = Coord(r + dr, c + dc)
            if nxt not in parent and area.contains(*nxt):
                parent[nxt] = cur
                q.append(nxt)
    if hit is None:
        return []
    carved = []
    cur = hit
    while cur is not None:
        if grid.at(*cur) == WALL:
            grid.set(cur.row, cur.col, FLOOR)
            carved.append(cur)
        cur = parent[cur]
    return carved


def merge_regions(grid: Grid2D, area: Rect) -> int:
    """Join every open region in ``area`` to the largest one. Returns the number merged.

    If ``area`` holds no open cell at all its center is carved so callers
    always get one region back.
    """
    regions = label_regions(grid, area)
    if not regions:
        c = area.center
        grid.set(c.row, c.col, FLOOR)
        return 0
    main_idx = max(range(len(regions)), key=lambda i: (len(regions[i]), -i))
    main: Set[Coord] = set(regions[main_idx])
    merged = 0
    for idx, region in enumerate(regions):
        if idx == main_idx:
            continue
        carved = _carve_link(grid, region, main, area)
        main.update(region)
        main.update(carved)
        merged += 1
    return merged


def main_region(grid: Grid2D, area: Rect) -> List[Coord]:
    """Largest open region in ``area`` (empty list when none)."""
    regions = label_regions(grid, area)
    if not regions:
        return []
    return max(regions, key=len)


__all__ = [
    "is_open",
    "flood_distances",
    "farthest_cell",
    "label_regions",
    "merge_regions",
    "main_region",
]
