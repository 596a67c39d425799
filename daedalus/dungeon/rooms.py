from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, NamedTuple

from .tiles import Coord


class Rect(NamedTuple):
    """Axis-aligned cell rectangle: ``height`` rows by ``width`` cols from (top, left)."""

    top: int
    left: int
    height: int
    width: int

    @property
    def bottom(self) -> int:
        return self.top + self.height - 1

    @property
    def right(self) -> int:
        return self.left + self.width - 1

    @property
    def area(self) -> int:
        return self.height * self.width

    @property
    def center(self) -> Coord:
        return Coord(self.top + (self.height - 1) // 2, self.left + (self.width - 1) // 2)

    def contains(self, row: int, col: int) -> bool:
        return self.top <= row <= self.bottom and self.left <= col <= self.right

    def cells(self) -> Iterator[Coord]:
        for r in range(self.top, self.top + self.height):
            for c in range(self.left, self.left + self.width):
                yield Coord(r, c)


@dataclass
class Room:
    top: int
    left: int
    height: int
    width: int

    @classmethod
    def from_corners(cls, top_left, bottom_right) -> "Room":
        (r0, c0), (r1, c1) = top_left, bottom_right
        return cls(r0, c0, r1 - r0 + 1, c1 - c0 + 1)

    @property
    def rect(self) -> Rect:
        return Rect(self.top, self.left, self.height, self.width)

    @property
    def center(self) -> Coord:
        return self.rect.center

    def cells(self) -> Iterator[Coord]:
        return self.rect.cells()

    def touches(self, other: "Room", gap: int = 1) -> bool:
        """True when the rooms overlap or are closer than ``gap`` wall cells."""
        return (
            self.top - gap <= other.top + other.height - 1
            and self.top + self.height - 1 + gap >= other.top
            and self.left - gap <= other.left + other.width - 1
            and self.left + self.width - 1 + gap >= other.left
        )


def interior(rows: int, cols: int) -> Rect:
    """Carvable area: everything but a 1-cell border, when the grid is big enough for one."""
    top, height = (1, rows - 2) if rows >= 3 else (0, rows)
    left, width = (1, cols - 2) if cols >= 3 else (0, cols)
    return Rect(top, left, height, width)


__all__ = ["Rect", "Room", "interior"]
