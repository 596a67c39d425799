"""Generation tuning knobs.

Defaults are suitable for maps between roughly 10x10 and 200x200. Every field
can be overridden through a ``DAEDALUS_<FIELD>`` environment variable (for
example ``DAEDALUS_CA_GENERATIONS=6``); a ``.env`` file is honoured as well.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, fields
from typing import Optional

from dotenv import load_dotenv

# Load .env if present so tuning overrides can live next to the embedding app
load_dotenv()

ENV_PREFIX = "DAEDALUS_"
_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off", ""}


@dataclass
class GenerationConfig:
    # Pathfinding
    diagonal_moves: bool = False
    validate_on_generate: bool = True
    enable_metrics: bool = True
    # BSP
    bsp_min_leaf: int = 6
    bsp_max_depth: int = 8
    bsp_min_room: int = 3
    # Drunken walk
    walk_coverage: float = 0.4
    walk_continue_bias: float = 0.6
    walk_max_steps: Optional[int] = None
    # Cellular automata
    ca_fill_probability: float = 0.45
    ca_generations: int = 5
    # Voronoi
    voronoi_seed_count: Optional[int] = None
    voronoi_loop_chance: float = 0.15
    # Perlin noise
    perlin_scale: float = 8.0
    perlin_octaves: int = 3
    perlin_persistence: float = 0.5
    perlin_threshold: float = 0.1

    def __post_init__(self):
        if self.bsp_min_leaf < 3:
            raise ValueError("bsp_min_leaf must be >= 3")
        if self.bsp_max_depth < 0:
            raise ValueError("bsp_max_depth must be >= 0")
        if self.bsp_min_room < 1:
            raise ValueError("bsp_min_room must be >= 1")
        for name in ("walk_coverage", "walk_continue_bias", "ca_fill_probability", "voronoi_loop_chance"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} must be within [0, 1], got {value}")
        if self.ca_generations < 0:
            raise ValueError("ca_generations must be >= 0")
        if self.perlin_scale <= 0:
            raise ValueError("perlin_scale must be > 0")
        if self.perlin_octaves < 1:
            raise ValueError("perlin_octaves must be >= 1")

    @classmethod
    def from_env(cls, environ=None, **overrides) -> "GenerationConfig":
        """Build a config from ``DAEDALUS_*`` variables; keyword overrides win."""
        env = os.environ if environ is None else environ
        values = {}
        for f in fields(cls):
            key = ENV_PREFIX + f.name.upper()
            if key in env:
                values[f.name] = _coerce(key, env[key], f.default)
        values.update(overrides)
        return cls(**values)


def _coerce(key: str, raw: str, default):
    raw = raw.strip()
    try:
        if isinstance(default, bool):
            low = raw.lower()
            if low in _TRUTHY:
                return True
            if low in _FALSY:
                return False
            raise ValueError(raw)
        if default is None:
            # Optional ints: blank / "none" keeps the derived default
            return None if raw.lower() in ("", "none") else int(raw)
        if isinstance(default, int):
            return int(raw)
        return float(raw)
    except ValueError:
        raise ValueError(f"invalid value for {key}: {raw!r}") from None


__all__ = ["GenerationConfig", "ENV_PREFIX"]
