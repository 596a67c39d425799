"""Dungeon model: tile grid with entrance/exit semantics, generation and validation.

Lifecycle (``GenerationState``):
    UNINITIALIZED -> GENERATING -> GENERATED -> VALIDATED

    * A fresh model is all WALL with no entrance or exit.
    * ``generate(method)`` resets the grid, runs one strategy and checks that
      exactly one ENTRANCE and one EXIT exist (GENERATED). When
      ``config.validate_on_generate`` is set it then runs ``find_path``.
    * ``find_path`` moves the model to VALIDATED when the exit is reachable
      and caches the route returned by ``hot_path``.
    * Any later tile mutation drops the cached route and falls back to
      GENERATED (both endpoints set) or UNINITIALIZED.

Invariants enforced here:
    * At most one ENTRANCE and one EXIT cell. Setting a new one resets the old
      cell to FLOOR; overwriting the entrance/exit cell clears the coordinate.
    * A stored entrance/exit coordinate always points at a matching tile.
    * Generation is all-or-nothing: an unsupported method is rejected before
      any mutation, and a strategy that raises is rolled back (grid,
      endpoints, random stream, state).

Variants:
    Dungeon       supports NAIVE only.
    RogueDungeon  supports every method and tracks carved rooms.

Public contract:
    new_dungeon(rows, cols, seed=None) -> RogueDungeon
    tile_at / set_tile / set_entrance / set_exit / is_wall / is_exit
    generate(method) / find_path() / solve() / hot_path() / export_tiles()
"""

from __future__ import annotations

import random
import time
from typing import Any, Dict, FrozenSet, List, MutableSequence, Optional

from ..config import GenerationConfig
from ..logging_utils import get_logger
from .connectivity import is_open
from .errors import GenerationError, InvalidDimension, OutOfBounds, PathNotValidated, UnsupportedMethod
from .generators import GENERATORS
from .grid import Grid2D
from .metrics import init_metrics, tile_counts
from .pathfinding import NO_PATH, PathResult, shortest_path
from .rooms import Room
from .tiles import (
    ENTRANCE,
    EXIT,
    FLOOR,
    GLYPHS,
    WALL,
    Coord,
    GenerationMethod,
    GenerationState,
    TileKind,
)

log = get_logger("daedalus.dungeon")

_SEED_MASK = (1 << 64) - 1


class Dungeon:
    supported_methods: FrozenSet[GenerationMethod] = frozenset({GenerationMethod.NAIVE})

    def __init__(
        self,
        rows: int,
        cols: int,
        seed: Optional[int] = None,
        config: Optional[GenerationConfig] = None,
    ):
        self._tiles: Grid2D[TileKind] = Grid2D(rows, cols, WALL)
        if seed is None:
            seed = time.time_ns() & _SEED_MASK
        self.seed = seed
        # Instance-local stream; the global random module is never touched
        self._rng = random.Random(seed)
        self.config = config if config is not None else GenerationConfig.from_env()
        self._entrance: Optional[Coord] = None
        self._exit: Optional[Coord] = None
        self._state = GenerationState.UNINITIALIZED
        self._path: Optional[PathResult] = None
        self.method: Optional[GenerationMethod] = None
        self.metrics: Dict[str, Any] = init_metrics() if self.config.enable_metrics else {}

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def rows(self) -> int:
        return self._tiles.rows

    @property
    def cols(self) -> int:
        return self._tiles.cols

    @property
    def tiles(self) -> Grid2D:
        """Live tile grid. Strategies write WALL/FLOOR here; use set_tile for anything else."""
        return self._tiles

    @property
    def entrance(self) -> Optional[Coord]:
        return self._entrance

    @property
    def exit(self) -> Optional[Coord]:
        return self._exit

    @property
    def state(self) -> GenerationState:
        return self._state

    def tile_at(self, i: int, j: int) -> TileKind:
        return self._tiles.at(i, j)

    def is_wall(self, i: int, j: int) -> bool:
        return self._tiles.at(i, j) == WALL

    def is_exit(self, i: int, j: int) -> bool:
        return self._tiles.at(i, j) == EXIT

    def is_entrance(self, i: int, j: int) -> bool:
        return self._tiles.at(i, j) == ENTRANCE

    def is_walkable(self, i: int, j: int) -> bool:
        return is_open(self._tiles.at(i, j))

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def set_tile(self, i: int, j: int, kind) -> None:
        if not self._tiles.in_bounds(i, j):
            raise OutOfBounds(i, j, self.rows, self.cols)
        kind = TileKind(kind)
        pos = Coord(i, j)
        if kind == ENTRANCE and self._entrance is not None and self._entrance != pos:
            self._tiles.set(self._entrance.row, self._entrance.col, FLOOR)
        if kind == EXIT and self._exit is not None and self._exit != pos:
            self._tiles.set(self._exit.row, self._exit.col, FLOOR)
        if self._entrance == pos and kind != ENTRANCE:
            self._entrance = None
        if self._exit == pos and kind != EXIT:
            self._exit = None
        self._tiles.set(i, j, kind)
        if kind == ENTRANCE:
            self._entrance = pos
        elif kind == EXIT:
            self._exit = pos
        self._after_mutation()

    def set_entrance(self, i: int, j: int) -> None:
        self.set_tile(i, j, ENTRANCE)

    def set_exit(self, i: int, j: int) -> None:
        self.set_tile(i, j, EXIT)

    def _after_mutation(self):
        if self._state == GenerationState.GENERATING:
            return
        self._path = None
        if self._entrance is not None and self._exit is not None:
            self._state = GenerationState.GENERATED
        else:
            self._state = GenerationState.UNINITIALIZED

    # ------------------------------------------------------------------
    # Generation
    # ------------------------------------------------------------------
    def generate(self, method) -> None:
        method = GenerationMethod(method)
        if method not in self.supported_methods:
            raise UnsupportedMethod(method, type(self).__name__)
        if len(self._tiles) < 2:
            raise InvalidDimension(f"{self.rows}x{self.cols} grid cannot hold distinct entrance and exit")

        snapshot = self._snapshot()
        self._reset_for_generation()
        self._state = GenerationState.GENERATING
        t0 = time.perf_counter()
        try:
            extra = GENERATORS[method](self, self._rng, self.config)
            self._check_endpoints(method)
        except Exception:
            self._restore(snapshot)
            log.warn(event="generation_rolled_back", method=method.name, seed=self.seed)
            raise
        carve_ms = (time.perf_counter() - t0) * 1000.0
        self._state = GenerationState.GENERATED
        self.method = method

        validate_ms = None
        if self.config.validate_on_generate:
            t1 = time.perf_counter()
            self.find_path()
            validate_ms = (time.perf_counter() - t1) * 1000.0
        if self.config.enable_metrics:
            self._record_metrics(method, extra, carve_ms, validate_ms)
        log.info(
            event="dungeon_generated",
            variant=type(self).__name__,
            method=method.name,
            seed=self.seed,
            rows=self.rows,
            cols=self.cols,
            state=self._state.value,
            carve_ms=round(carve_ms, 3),
        )

    def _reset_for_generation(self):
        self._tiles.fill(WALL)
        self._entrance = None
        self._exit = None
        self._path = None

    def _snapshot(self) -> Dict[str, Any]:
        return {
            "tiles": self._tiles.copy(),
            "entrance": self._entrance,
            "exit": self._exit,
            "state": self._state,
            "path": self._path,
            "method": self.method,
            "rng": self._rng.getstate(),
        }

    def _restore(self, snap: Dict[str, Any]):
        self._tiles = snap["tiles"]
        self._entrance = snap["entrance"]
        self._exit = snap["exit"]
        self._state = snap["state"]
        self._path = snap["path"]
        self.method = snap["method"]
        self._rng.setstate(snap["rng"])

    def _check_endpoints(self, method: GenerationMethod):
        entrances = [cell for cell, t in self._tiles.cells() if t == ENTRANCE]
        exits = [cell for cell, t in self._tiles.cells() if t == EXIT]
        if entrances != [self._entrance] or exits != [self._exit] or self._entrance is None or self._exit is None:
            raise GenerationError(
                f"{method.name} left {len(entrances)} entrance(s) and {len(exits)} exit(s); expected one of each"
            )

    def _record_metrics(self, method, extra, carve_ms, validate_ms):
        self.metrics = init_metrics()
        self.metrics.update(tile_counts(self._tiles))
        self.metrics.update(extra or {})
        self.metrics["method"] = method.name
        self.metrics["seed"] = self.seed
        self.metrics["path_length"] = self._path.length if self._path is not None else None
        self.metrics["phase_ms"] = {"carve": round(carve_ms, 3)}
        total = carve_ms
        if validate_ms is not None:
            self.metrics["phase_ms"]["validate"] = round(validate_ms, 3)
            total += validate_ms
        self.metrics["runtime_ms"] = round(total, 3)

    # ------------------------------------------------------------------
    # Pathfinding
    # ------------------------------------------------------------------
    def solve(self) -> PathResult:
        """Search entrance -> exit; caches the route and validates on success."""
        if self._entrance is None or self._exit is None:
            log.debug(event="path_search", found=False, reason="endpoints_unset")
            self._path = None
            return NO_PATH
        result = shortest_path(
            self._tiles,
            is_open,
            self._entrance,
            self._exit,
            diagonal=self.config.diagonal_moves,
        )
        log.debug(event="path_search", found=result.found, length=result.length, seed=self.seed)
        if result.found:
            self._path = result
            self._state = GenerationState.VALIDATED
        else:
            self._path = None
            log.warn(event="path_not_found", seed=self.seed, entrance=self._entrance, exit=self._exit)
        if self.config.enable_metrics:
            self.metrics["path_length"] = result.length if result.found else None
        return result

    def find_path(self) -> bool:
        return self.solve().found

    def hot_path(self) -> List[Coord]:
        if self._state != GenerationState.VALIDATED or self._path is None:
            raise PathNotValidated(f"hot path unavailable in state {self._state.value}; call find_path() first")
        return list(self._path.path)

    # ------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------
    def export_tiles(self, buffer: Optional[MutableSequence] = None) -> MutableSequence:
        """Row-major raw tile values (``int(TileKind)``), written into ``buffer`` if given."""
        raw = [int(t) for t in self._tiles.export([])]
        if buffer is None:
            return raw
        buffer[:] = raw
        return buffer

    def to_ascii(self) -> str:
        return "\n".join(
            "".join(GLYPHS[self._tiles.at(r, c)] for c in range(self.cols)) for r in range(self.rows)
        )

    def to_dict(self) -> Dict[str, Any]:
        path = self._path.path if self._state == GenerationState.VALIDATED and self._path is not None else ()
        return {
            "seed": self.seed,
            "rows": self.rows,
            "cols": self.cols,
            "method": self.method.name if self.method is not None else None,
            "state": self._state.value,
            "entrance": list(self._entrance) if self._entrance is not None else None,
            "exit": list(self._exit) if self._exit is not None else None,
            "tiles": self.export_tiles(),
            "hot_path": [list(c) for c in path],
            "metrics": self.metrics,
        }

    def __repr__(self) -> str:
        return f"{type(self).__name__}(rows={self.rows}, cols={self.cols}, seed={self.seed}, state={self._state.value})"


class RogueDungeon(Dungeon):
    """Dungeon variant supporting every generation method plus explicit room placement."""

    supported_methods: FrozenSet[GenerationMethod] = frozenset(GenerationMethod)

    def __init__(self, rows: int, cols: int, seed: Optional[int] = None, config: Optional[GenerationConfig] = None):
        super().__init__(rows, cols, seed=seed, config=config)
        self.rooms: List[Room] = []

    def place_room(self, top_left, bottom_right) -> bool:
        """Carve an inclusive FLOOR rectangle.

        Raises OutOfBounds for corners off the grid; returns False for an
        inverted rectangle or one overlapping/touching an existing room.
        """
        (r0, c0), (r1, c1) = top_left, bottom_right
        for r, c in ((r0, c0), (r1, c1)):
            if not self._tiles.in_bounds(r, c):
                raise OutOfBounds(r, c, self.rows, self.cols)
        if r1 < r0 or c1 < c0:
            return False
        room = Room.from_corners((r0, c0), (r1, c1))
        if any(room.touches(other) for other in self.rooms):
            return False
        for r, c in room.cells():
            self.set_tile(r, c, FLOOR)
        self.rooms.append(room)
        return True

    def _reset_for_generation(self):
        super()._reset_for_generation()
        self.rooms = []

    def _snapshot(self) -> Dict[str, Any]:
        snap = super()._snapshot()
        snap["rooms"] = list(self.rooms)
        return snap

    def _restore(self, snap: Dict[str, Any]):
        super()._restore(snap)
        self.rooms = snap["rooms"]


def new_dungeon(
    rows: int,
    cols: int,
    seed: Optional[int] = None,
    *,
    config: Optional[GenerationConfig] = None,
    variant: type = RogueDungeon,
) -> Dungeon:
    """Construct a dungeon model (``RogueDungeon`` unless another variant is given)."""
    return variant(rows, cols, seed=seed, config=config)


__all__ = ["Dungeon", "RogueDungeon", "new_dungeon"]
