from __future__ import annotations

from ..tiles import FLOOR


def generate_naive(dungeon, rng, config) -> dict:
    """Open floor everywhere, entrance top-left, exit bottom-right.

    Uses no randomness; every dungeon variant supports it as the fallback layout.
    """
    dungeon.tiles.fill(FLOOR)
    dungeon.set_entrance(0, 0)
    dungeon.set_exit(dungeon.rows - 1, dungeon.cols - 1)
    return {}
