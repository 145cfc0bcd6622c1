"""Reproducible random source from a seed. Seed -1 = new random seed each call."""

import random
from typing import Tuple

import numpy as np


def make_rng(seed: int) -> Tuple[np.random.Generator, int]:
    """Return (generator, seed_used). Uniform draws come from generator.random() in [0, 1)."""
    if seed == -1:
        seed_used = random.randint(0, 2**31 - 1)
    else:
        seed_used = seed
    return np.random.default_rng(seed_used), seed_used
