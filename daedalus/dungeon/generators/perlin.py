"""Perlin noise terrain.

Classic 2D gradient noise: a 256-entry permutation table (doubled to avoid
wrapping) shuffled with the dungeon's random stream, eight gradient
directions, quintic fade. Several octaves are summed (fBm) and normalised
back to roughly [-1, 1]; interior cells below ``perlin_threshold`` become
floor. A random sampling offset keeps different seeds from sharing the
lattice origin, where plain Perlin noise is always zero.
"""

from __future__ import annotations

import math

from ..connectivity import main_region, merge_regions
from ..rooms import interior
from ..tiles import FLOOR, WALL
from .common import place_endpoints

_GRADIENTS = ((1, 1), (-1, 1), (1, -1), (-1, -1), (1, 0), (-1, 0), (0, 1), (0, -1))


def _fade(t: float) -> float:
    return t * t * t * (t * (t * 6 - 15) + 10)


def _lerp(a: float, b: float, t: float) -> float:
    return a + t * (b - a)


def _grad(h: int, x: float, y: float) -> float:
    gx, gy = _GRADIENTS[h & 7]
    return gx * x + gy * y


class PerlinNoise:
    def __init__(self, rng):
        perm = list(range(256))
        rng.shuffle(perm)
        self._perm = perm + perm

    def noise(self, x: float, y: float) -> float:
        x0 = math.floor(x)
        y0 = math.floor(y)
        xf = x - x0
        yf = y - y0
        xi = x0 & 255
        yi = y0 & 255
        p = self._perm
        aa = p[p[xi] + yi]
        ab = p[p[xi] + yi + 1]
        ba = p[p[xi + 1] + yi]
        bb = p[p[xi + 1] + yi + 1]
        u = _fade(xf)
        v = _fade(yf)
        top = _lerp(_grad(aa, xf, yf), _grad(ba, xf - 1, yf), u)
        bottom = _lerp(_grad(ab, xf, yf - 1), _grad(bb, xf - 1, yf - 1), u)
        return _lerp(top, bottom, v)

    def fbm(self, x: float, y: float, octaves: int, persistence: float) -> float:
        total = 0.0
        amplitude = 1.0
        frequency = 1.0
        max_amplitude = 0.0
        for _ in range(octaves):
            total += self.noise(x * frequency, y * frequency) * amplitude
            max_amplitude += amplitude
            amplitude *= persistence
            frequency *= 2
        return total / max_amplitude


def generate_perlin_noise(dungeon, rng, config) -> dict:
    area = interior(dungeon.rows, dungeon.cols)
    grid = dungeon.tiles
    field = PerlinNoise(rng)
    off_r = rng.uniform(0, 256)
    off_c = rng.uniform(0, 256)
    floor = 0
    for r, c in area.cells():
        value = field.fbm(
            r / config.perlin_scale + off_r,
            c / config.perlin_scale + off_c,
            config.perlin_octaves,
            config.perlin_persistence,
        )
        if value < config.perlin_threshold:
            grid.set(r, c, FLOOR)
            floor += 1
        else:
            grid.set(r, c, WALL)
    merged = merge_regions(grid, area)
    start = rng.choice(main_region(grid, area))
    place_endpoints(dungeon, start, area)
    return {"noise_floor": floor, "regions": merged + 1, "regions_merged": merged}
