"""Single-draw broadcast clock and orbit error samplers."""

from __future__ import annotations

import numpy as np

from stellar.catalog.characteristics import get_error_characteristics
from stellar.models import OrbitError
from stellar.stats.gaussian import gaussian, resolve_rng

# Passive hydrogen masers are roughly three times quieter than Rb/Cs at these horizons.
PHM_CLOCK_FACTOR = 0.3

CLOCK_STABILITY = {
    "Rb": 1e-12,
    "Cs": 5e-12,
    "PHM": 1e-14,
}


def sample_clock_error(
    constellation: str,
    clock_type: str = "Rb",
    rng: np.random.Generator | None = None,
) -> float:
    """Return one broadcast clock error (ns) for the constellation and clock type."""

    chars = get_error_characteristics(constellation)
    factor = PHM_CLOCK_FACTOR if clock_type == "PHM" else 1.0
    return gaussian(0.0, 1.0, rng) * chars.broadcast_clock_rms * factor


def sample_orbit_error(constellation: str, rng: np.random.Generator | None = None) -> OrbitError:
    """Return independent radial/along/cross orbit errors (m)."""

    chars = get_error_characteristics(constellation)
    rng = resolve_rng(rng)
    return OrbitError(
        radial=gaussian(0.0, chars.broadcast_orbit_radial, rng),
        along=gaussian(0.0, chars.broadcast_orbit_along, rng),
        cross=gaussian(0.0, chars.broadcast_orbit_cross, rng),
    )


def simulate_clock_drift(
    current_error_ns: float,
    clock_type: str,
    delta_s: float,
    rng: np.random.Generator | None = None,
) -> float:
    """Propagate a clock error by ``delta_s`` seconds of uniform frequency drift."""

    delta_s = float(delta_s)
    if delta_s < 0.0:
        raise ValueError("delta_s must be non-negative.")
    rng = resolve_rng(rng)
    stability = CLOCK_STABILITY.get(clock_type, CLOCK_STABILITY["Rb"])
    # Fractional frequency times elapsed seconds, scaled by c.
    drift = (rng.random() - 0.5) * stability * 3e8 * delta_s
    return float(current_error_ns) + drift
