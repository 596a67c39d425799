"""Voronoi chambers.

Random seed points partition the interior by nearest seed (squared Euclidean,
lower seed index wins ties). Cells that border another region become the
walls between chambers; the rest is floor. Adjacent chambers are linked along
a minimum spanning tree of seed distances (union-find, cheapest first) plus a
few extra links for loops, each as an L-shaped corridor between seed points.
A final ``merge_regions`` pass catches chambers that the discrete boundary
split apart.
"""

from __future__ import annotations

from typing import Dict, List, Set, Tuple

from ..connectivity import merge_regions
from ..rooms import interior
from ..tiles import FLOOR, WALL, Coord
from .common import carve, carve_l_corridor, place_endpoints


def _nearest(cell: Coord, seeds: List[Coord]) -> int:
    best, best_d = 0, None
    for i, s in enumerate(seeds):
        d = (cell.row - s.row) ** 2 + (cell.col - s.col) ** 2
        if best_d is None or d < best_d:
            best, best_d = i, d
    return best


def _spanning_links(edges: List[Tuple[int, int, int]], count: int, rng, loop_chance: float) -> List[Tuple[int, int]]:
    parent = list(range(count))

    def find(a):
        while parent[a] != a:
            parent[a] = parent[parent[a]]
            a = parent[a]
        return a

    tree, extra = [], []
    for _d, a, b in edges:
        ra, rb = find(a), find(b)
        if ra != rb:
            parent[rb] = ra
            tree.append((a, b))
        else:
            extra.append((a, b))
    links = tree[:]
    for a, b in extra:
        if rng.random() < loop_chance:
            links.append((a, b))
    return links


def generate_voronoi(dungeon, rng, config) -> dict:
    area = interior(dungeon.rows, dungeon.cols)
    grid = dungeon.tiles
    cells = list(area.cells())
    count = config.voronoi_seed_count or max(2, area.area // 40)
    count = min(count, len(cells))
    seeds = rng.sample(cells, count)

    owner: Dict[Coord, int] = {cell: _nearest(cell, seeds) for cell in cells}
    adjacent: Set[Tuple[int, int]] = set()
    for cell in cells:
        own = owner[cell]
        boundary = False
        for dr, dc in ((-1, 0), (1, 0), (0, -1), (0, 1)):
            other = owner.get((cell.row + dr, cell.col + dc))
            if other is not None and other != own:
                boundary = True
                adjacent.add((min(own, other), max(own, other)))
        grid.set(cell.row, cell.col, WALL if boundary else FLOOR)

    edges = sorted(
        ((seeds[a].row - seeds[b].row) ** 2 + (seeds[a].col - seeds[b].col) ** 2, a, b) for a, b in adjacent
    )
    links = _spanning_links(edges, count, rng, config.voronoi_loop_chance)
    for a, b in links:
        carve_l_corridor(grid, seeds[a], seeds[b], rng)
    carve(grid, *seeds[0])
    merged = merge_regions(grid, area)
    place_endpoints(dungeon, seeds[0], area)
    return {"regions": count, "links": len(links), "regions_merged": merged}
