"""Binary space partition rooms.

Phases:
    * Recursively split the interior into rectangles until a piece is too
      small to hold two ``bsp_min_leaf`` halves or ``bsp_max_depth`` is hit.
      Tall pieces tend to be cut horizontally and wide ones vertically.
    * Carve one room per leaf, keeping a 1-cell margin inside the leaf so rooms
      of neighbouring leaves never touch.
    * Walk the tree bottom-up and join the two subtrees of every split with an
      L-shaped corridor between their closest room centers. The corridors form
      a spanning tree over the rooms, so every room is reachable.

Rooms are recorded through ``RogueDungeon.place_room``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from ..rooms import Rect, Room, interior
from .common import carve_l_corridor, place_endpoints


@dataclass
class _Node:
    rect: Rect
    left: Optional["_Node"] = None
    right: Optional["_Node"] = None
    room: Optional[Room] = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None

    def rooms(self) -> List[Room]:
        if self.is_leaf:
            return [self.room] if self.room is not None else []
        return self.left.rooms() + self.right.rooms()

    def leaves(self) -> List["_Node"]:
        if self.is_leaf:
            return [self]
        return self.left.leaves() + self.right.leaves()


def _split(rect: Rect, depth: int, rng, config) -> _Node:
    node = _Node(rect)
    min_leaf = config.bsp_min_leaf
    if depth >= config.bsp_max_depth:
        return node
    can_cut_rows = rect.height >= min_leaf * 2
    can_cut_cols = rect.width >= min_leaf * 2
    if not (can_cut_rows or can_cut_cols):
        return node
    if can_cut_rows and can_cut_cols:
        cut_rows = (rect.width / rect.height) < rng.uniform(0.8, 1.2)
    else:
        cut_rows = can_cut_rows
    if cut_rows:
        cut = rng.randint(min_leaf, rect.height - min_leaf)
        a = Rect(rect.top, rect.left, cut, rect.width)
        b = Rect(rect.top + cut, rect.left, rect.height - cut, rect.width)
    else:
        cut = rng.randint(min_leaf, rect.width - min_leaf)
        a = Rect(rect.top, rect.left, rect.height, cut)
        b = Rect(rect.top, rect.left + cut, rect.height, rect.width - cut)
    node.left = _split(a, depth + 1, rng, config)
    node.right = _split(b, depth + 1, rng, config)
    return node


def _room_in(leaf: Rect, rng, min_room: int) -> Room:
    margin_r = 1 if leaf.height >= 3 else 0
    margin_c = 1 if leaf.width >= 3 else 0
    avail_h = leaf.height - 2 * margin_r
    avail_w = leaf.width - 2 * margin_c
    h = rng.randint(min(min_room, avail_h), avail_h)
    w = rng.randint(min(min_room, avail_w), avail_w)
    top = rng.randint(leaf.top + margin_r, leaf.top + margin_r + avail_h - h)
    left = rng.randint(leaf.left + margin_c, leaf.left + margin_c + avail_w - w)
    return Room(top, left, h, w)


def _connect(node: _Node, grid, rng) -> int:
    if node.is_leaf:
        return 0
    links = _connect(node.left, grid, rng) + _connect(node.right, grid, rng)
    best = None
    for a in node.left.rooms():
        for b in node.right.rooms():
            d = abs(a.center.row - b.center.row) + abs(a.center.col - b.center.col)
            if best is None or d < best[0]:
                best = (d, a, b)
    if best is not None:
        carve_l_corridor(grid, best[1].center, best[2].center, rng)
        links += 1
    return links


def generate_bsp(dungeon, rng, config) -> dict:
    area = interior(dungeon.rows, dungeon.cols)
    root = _split(area, 0, rng, config)
    leaves = root.leaves()
    for leaf in leaves:
        room = _room_in(leaf.rect, rng, config.bsp_min_room)
        dungeon.place_room((room.top, room.left), (room.top + room.height - 1, room.left + room.width - 1))
        leaf.room = room
    corridors = _connect(root, dungeon.tiles, rng)
    place_endpoints(dungeon, leaves[0].room.center, area)
    return {"leaves": len(leaves), "rooms": len(dungeon.rooms), "corridors": corridors}
