"""
Per-tick growth. Planted tiles below the ceiling advance by 1 + U*6 and are
clamped once to MAX_GROWTH. Blooms are never auto-harvested.
"""

from enum import Enum

import numpy as np

from garden.constants import GROWING_MAX, MAX_GROWTH, SPROUT_MAX, TICK_MIN_STEP, TICK_STEP_SPAN
from garden.tiles import Grid


class Stage(str, Enum):
    EMPTY = "empty"
    SPROUT = "sprout"
    GROWING = "growing"
    BLOOM = "bloom"


def stage_of(growth: float, planted: bool = True) -> Stage:
    """Visual category. Bloom (>= 70) is the harvest-eligible signal."""
    if not planted or growth <= 0:
        return Stage.EMPTY
    if growth < SPROUT_MAX:
        return Stage.SPROUT
    if growth < GROWING_MAX:
        return Stage.GROWING
    return Stage.BLOOM


def tick(grid: Grid, rng: np.random.Generator) -> None:
    """One tick, in place. Growth never decreases and never exceeds MAX_GROWTH."""
    active = grid.planted & (grid.growth < MAX_GROWTH)
    n = int(np.count_nonzero(active))
    if n == 0:
        return
    step = TICK_MIN_STEP + rng.random(n) * TICK_STEP_SPAN
    grid.growth[active] = np.minimum(MAX_GROWTH, grid.growth[active] + step)
