"""Fixed-size, row-major dense 2D storage.

``Grid2D`` is the only place that knows about the linear layout: cell
``(row, col)`` lives at ``row * cols + col``. Dimensions never change after
construction and every access is bounds-checked (negative indices included),
so a bad coordinate surfaces as ``OutOfBounds`` instead of wrapping around.
"""

from __future__ import annotations

from typing import Generic, Iterator, List, MutableSequence, Tuple, TypeVar

from .errors import InvalidDimension, OutOfBounds
from .tiles import Coord

T = TypeVar("T")


class Grid2D(Generic[T]):
    __slots__ = ("_rows", "_cols", "_data")

    def __init__(self, rows: int, cols: int, default: T = None):
        if rows <= 0 or cols <= 0:
            raise InvalidDimension(f"grid dimensions must be positive, got {rows}x{cols}")
        self._rows = rows
        self._cols = cols
        self._data: List[T] = [default] * (rows * cols)

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    def in_bounds(self, i: int, j: int) -> bool:
        return 0 <= i < self._rows and 0 <= j < self._cols

    def _index(self, i: int, j: int) -> int:
        if not (0 <= i < self._rows and 0 <= j < self._cols):
            raise OutOfBounds(i, j, self._rows, self._cols)
        return i * self._cols + j

    def at(self, i: int, j: int) -> T:
        return self._data[self._index(i, j)]

    def set(self, i: int, j: int, value: T) -> None:
        self._data[self._index(i, j)] = value

    def fill(self, value: T) -> None:
        self._data[:] = [value] * len(self._data)

    def copy(self) -> "Grid2D[T]":
        clone = Grid2D.__new__(Grid2D)
        clone._rows = self._rows
        clone._cols = self._cols
        clone._data = list(self._data)
        return clone

    def cells(self) -> Iterator[Tuple[Coord, T]]:
        """Yield ``(Coord, value)`` pairs in row-major order."""
        cols = self._cols
        for idx, value in enumerate(self._data):
            yield Coord(idx // cols, idx % cols), value

    def export(self, buffer: MutableSequence) -> MutableSequence:
        """Replace ``buffer``'s contents with the backing store (row-major)."""
        buffer[:] = self._data
        return buffer

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Grid2D):
            return NotImplemented
        return (self._rows, self._cols, self._data) == (other._rows, other._cols, other._data)

    def __repr__(self) -> str:
        return f"Grid2D(rows={self._rows}, cols={self._cols})"


__all__ = ["Grid2D"]
