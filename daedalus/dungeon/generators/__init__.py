"""Generation strategies keyed by ``GenerationMethod``.

Each strategy is a callable ``(dungeon, rng, config) -> dict``: it mutates the
dungeon's tiles, draws randomness only from ``rng`` (the dungeon's own
stream), leaves exactly one entrance and one exit, and returns
strategy-specific metrics.
"""

from __future__ import annotations

from typing import Callable, Dict

from ..tiles import GenerationMethod
from .bsp import generate_bsp
from .cellular import generate_cellular_automata
from .drunken_walk import generate_drunken_walk
from .naive import generate_naive
from .perlin import generate_perlin_noise
from .voronoi import generate_voronoi

Strategy = Callable[..., dict]

GENERATORS: Dict[GenerationMethod, Strategy] = {
    GenerationMethod.NAIVE: generate_naive,
    GenerationMethod.BSP: generate_bsp,
    GenerationMethod.DRUNKEN_WALK: generate_drunken_walk,
    GenerationMethod.CELLULAR_AUTOMATA: generate_cellular_automata,
    GenerationMethod.VORONOI: generate_voronoi,
    GenerationMethod.PERLIN_NOISE: generate_perlin_noise,
}

__all__ = [
    "GENERATORS",
    "Strategy",
    "generate_naive",
    "generate_bsp",
    "generate_drunken_walk",
    "generate_cellular_automata",
    "generate_voronoi",
    "generate_perlin_noise",
]
