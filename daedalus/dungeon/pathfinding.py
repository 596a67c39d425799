"""Uniform-cost shortest path search (Dijkstra) over a ``Grid2D``.

Every walkable-to-walkable move costs 1, so the search expands cells in
breadth order; the heap-backed frontier keeps it a textbook Dijkstra so
weighted moves can be introduced without changing callers.

Neighbour order is fixed (N, S, W, E, then NW, NE, SW, SE) and heap ties are
broken by insertion sequence, which makes the returned path deterministic for
a given grid.
"""

from __future__ import annotations

import heapq
from typing import Callable, Dict, Iterator, NamedTuple, Optional, Tuple

from .errors import OutOfBounds
from .grid import Grid2D
from .tiles import Coord

ORTHOGONAL = ((-1, 0), (1, 0), (0, -1), (0, 1))
DIAGONAL = ((-1, -1), (-1, 1), (1, -1), (1, 1))


class PathResult(NamedTuple):
    found: bool
    path: Tuple[Coord, ...]

    @property
    def length(self) -> int:
        """Number of moves along the path (0 when no path)."""
        return max(len(self.path) - 1, 0)


NO_PATH = PathResult(False, ())


def neighbors(
    grid: Grid2D,
    is_walkable: Callable[[object], bool],
    cell: Coord,
    diagonal: bool = False,
) -> Iterator[Coord]:
    """Yield walkable neighbours of ``cell`` in the fixed search order.

    Diagonal steps are only offered when both orthogonal cells they pass are
    walkable (no squeezing between two walls).
    """
    r, c = cell
    for dr, dc in ORTHOGONAL:
        nr, nc = r + dr, c + dc
        if grid.in_bounds(nr, nc) and is_walkable(grid.at(nr, nc)):
            yield Coord(nr, nc)
    if not diagonal:
        return
    for dr, dc in DIAGONAL:
        nr, nc = r + dr, c + dc
        if not grid.in_bounds(nr, nc) or not is_walkable(grid.at(nr, nc)):
            continue
        if is_walkable(grid.at(r + dr, c)) and is_walkable(grid.at(r, c + dc)):
            yield Coord(nr, nc)


def shortest_path(
    grid: Grid2D,
    is_walkable: Callable[[object], bool],
    start,
    goal,
    *,
    diagonal: bool = False,
) -> PathResult:
    """Return the shortest walkable path from ``start`` to ``goal`` inclusive.

    ``is_walkable`` receives a cell value. Raises ``OutOfBounds`` for
    endpoints outside the grid; returns ``NO_PATH`` when either endpoint is
    not walkable or the two are not connected.
    """
    start = Coord(*start)
    goal = Coord(*goal)
    for r, c in (start, goal):
        if not grid.in_bounds(r, c):
            raise OutOfBounds(r, c, grid.rows, grid.cols)
    if not is_walkable(grid.at(*start)) or not is_walkable(grid.at(*goal)):
        return NO_PATH
    if start == goal:
        return PathResult(True, (start,))

    dist: Dict[Coord, int] = {start: 0}
    prev: Dict[Coord, Optional[Coord]] = {start: None}
    visited = set()
    seq = 0
    frontier = [(0, seq, start)]
    while frontier:
        d, _, node = heapq.heappop(frontier)
        if node in visited:
            continue
        visited.add(node)
        if node == goal:
            break
        for nxt in neighbors(grid, is_walkable, node, diagonal):
            if nxt in visited:
                continue
            nd = d + 1
            if nd < dist.get(nxt, nd + 1):
                dist[nxt] = nd
                prev[nxt] = node
                seq += 1
                heapq.heappush(frontier, (nd, seq, nxt))
    if goal not in visited:
        return NO_PATH

    path = []
    cur: Optional[Coord] = goal
    while cur is not None:
        path.append(cur)
        cur = prev[cur]
    path.reverse()
    return PathResult(True, tuple(path))


__all__ = ["PathResult", "NO_PATH", "shortest_path", "neighbors", "ORTHOGONAL", "DIAGONAL"]
