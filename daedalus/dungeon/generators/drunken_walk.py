from __future__ import annotations

from ..pathfinding import ORTHOGONAL
from ..rooms import interior
from ..tiles import Coord
from .common import carve, place_endpoints


def generate_drunken_walk(dungeon, rng, config) -> dict:
    """Random walker carving floor until a coverage target or step cap is reached.

    The walker keeps its heading with probability ``walk_continue_bias`` and
    otherwise turns to a random cardinal direction; a step that would leave the
    interior only changes the heading. Everything carved is connected to the
    start by construction, which becomes the entrance.
    """
    area = interior(dungeon.rows, dungeon.cols)
    grid = dungeon.tiles
    total = area.area
    target = min(total, max(1, round(config.walk_coverage * total)))
    max_steps = config.walk_max_steps if config.walk_max_steps is not None else total * 10

    start = Coord(rng.randint(area.top, area.bottom), rng.randint(area.left, area.right))
    carve(grid, *start)
    floor = 1
    pos = start
    heading = rng.choice(ORTHOGONAL)
    steps = 0
    while floor < target and steps < max_steps:
        steps += 1
        if rng.random() >= config.walk_continue_bias:
            heading = rng.choice(ORTHOGONAL)
        nr, nc = pos.row + heading[0], pos.col + heading[1]
        if not area.contains(nr, nc):
            heading = rng.choice(ORTHOGONAL)
            continue
        pos = Coord(nr, nc)
        if carve(grid, nr, nc):
            floor += 1

    place_endpoints(dungeon, start, area)
    return {"steps": steps, "floor_target": target}
