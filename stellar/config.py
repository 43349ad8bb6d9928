"""Configuration objects for synthetic forecast generation."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class StellarConfig:
    """Generation defaults."""

    rng_seed: int | None = None
    history_points: int = 96
    forecast_points: int = 96
    step_minutes: float = 15.0
    residual_samples: int = 500
    histogram_bins: int = 30
    bulletin_validity_hours: float = 4.0
    bulletin_growth_per_hour: float = 0.12

    def make_rng(self) -> np.random.Generator:
        """Return a generator seeded from ``rng_seed`` (fresh entropy when unset)."""

        return np.random.default_rng(self.rng_seed)
