"""
Display-only colors per tile stage. Empty = dark slate, sprout and growing =
greens, bloom = green blended toward warm gold by growth (g / 120).
"""

import numpy as np

from garden.constants import GROWING_MAX, SPROUT_MAX

EMPTY = np.array([11, 19, 32], dtype=np.float64)
SPROUT = np.array([90, 160, 110], dtype=np.float64)
GROWING = np.array([100, 190, 120], dtype=np.float64)
BLOOM_BASE = np.array([70, 200, 120], dtype=np.float64)
BLOOM_TINT = np.array([255, 215, 145], dtype=np.float64)
BACKGROUND = (6, 32, 34)


def tiles_to_rgb(growth: np.ndarray, planted: np.ndarray) -> np.ndarray:
    """Returns (n, 3) uint8 RGB for flat growth / planted arrays."""
    g = np.asarray(growth, dtype=np.float64).reshape(-1)
    p = np.asarray(planted, dtype=bool).reshape(-1)
    rgb = np.tile(EMPTY, (g.size, 1))
    live = p & (g > 0)
    sprout = live & (g < SPROUT_MAX)
    growing = live & (g >= SPROUT_MAX) & (g < GROWING_MAX)
    bloom = live & (g >= GROWING_MAX)
    rgb[sprout] = SPROUT
    rgb[growing] = GROWING
    t = np.clip(g[bloom] / 120.0, 0.0, 1.0).reshape(-1, 1)
    rgb[bloom] = (1.0 - t) * BLOOM_BASE + t * BLOOM_TINT
    return np.clip(rgb, 0, 255).astype(np.uint8)


def scale_factors(growth: np.ndarray, planted: np.ndarray) -> np.ndarray:
    """Tile draw scale: 1 when empty, 0.9 + g / 120 when planted."""
    g = np.asarray(growth, dtype=np.float64).reshape(-1)
    p = np.asarray(planted, dtype=bool).reshape(-1)
    return np.where(p & (g > 0), 0.9 + g / 120.0, 1.0)
