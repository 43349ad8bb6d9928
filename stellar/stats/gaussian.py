"""Box-Muller Gaussian sampling on an injectable random generator."""

from __future__ import annotations

import math

import numpy as np


def resolve_rng(rng: np.random.Generator | None) -> np.random.Generator:
    """Return ``rng`` or a freshly seeded default generator."""

    return rng if rng is not None else np.random.default_rng()


def gaussian(
    mean: float = 0.0,
    sigma: float = 1.0,
    rng: np.random.Generator | None = None,
) -> float:
    """Draw one value from N(mean, sigma^2) with the Box-Muller transform.

    ``u1`` is taken from (0, 1] so the logarithm is always finite.
    """

    rng = resolve_rng(rng)
    u1 = 1.0 - rng.random()
    u2 = rng.random()
    return float(mean + sigma * math.sqrt(-2.0 * math.log(u1)) * math.cos(2.0 * math.pi * u2))


def gaussian_array(
    size: int,
    mean: float = 0.0,
    sigma: float = 1.0,
    rng: np.random.Generator | None = None,
) -> np.ndarray:
    """Vectorised Box-Muller draw of ``size`` values."""

    if size < 0:
        raise ValueError("size must be non-negative.")
    rng = resolve_rng(rng)
    u1 = 1.0 - rng.random(size)
    u2 = rng.random(size)
    return mean + sigma * np.sqrt(-2.0 * np.log(u1)) * np.cos(2.0 * np.pi * u2)
