import math

import numpy as np
import pytest

from stellar.stats.gaussian import gaussian, gaussian_array
from stellar.stats.sampling import sample_clock_error, sample_orbit_error, simulate_clock_drift


class _ZeroRng:
    """Generator stand-in whose uniform draws are always 0.0."""

    def random(self, size=None):
        if size is None:
            return 0.0
        return np.zeros(size)


def test_gaussian_is_finite_when_uniform_draw_is_zero() -> None:
    value = gaussian(1.0, 2.0, rng=_ZeroRng())
    assert math.isfinite(value)
    assert value == pytest.approx(1.0)

    values = gaussian_array(4, rng=_ZeroRng())
    assert np.all(np.isfinite(values))


def test_gaussian_deterministic_with_seed() -> None:
    a = [gaussian(0.0, 1.0, np.random.default_rng(3)) for _ in range(3)]
    b = [gaussian(0.0, 1.0, np.random.default_rng(3)) for _ in range(3)]
    assert a == b


def test_gaussian_array_moments(rng: np.random.Generator) -> None:
    values = gaussian_array(20_000, mean=2.0, sigma=0.5, rng=rng)
    assert values.shape == (20_000,)
    assert abs(values.mean() - 2.0) < 0.02
    assert abs(values.std() - 0.5) < 0.02


def test_gaussian_array_rejects_negative_size() -> None:
    with pytest.raises(ValueError):
        gaussian_array(-1)


def test_phm_clock_errors_are_smaller(rng: np.random.Generator) -> None:
    rb = np.array([sample_clock_error("Galileo", "Rb", rng) for _ in range(4000)])
    phm = np.array([sample_clock_error("Galileo", "PHM", rng) for _ in range(4000)])
    assert rb.std() == pytest.approx(3.0, rel=0.08)
    assert phm.std() == pytest.approx(0.9, rel=0.08)


def test_orbit_error_scales_with_component_rms(rng: np.random.Generator) -> None:
    draws = [sample_orbit_error("GPS", rng) for _ in range(4000)]
    along = np.array([d.along for d in draws])
    radial = np.array([d.radial for d in draws])
    assert along.std() == pytest.approx(2.5, rel=0.08)
    assert radial.std() == pytest.approx(0.5, rel=0.08)


def test_clock_drift_bounds_and_validation(rng: np.random.Generator) -> None:
    delta_s = 3600.0
    for clock, stability in (("Rb", 1e-12), ("Cs", 5e-12), ("PHM", 1e-14)):
        drifted = simulate_clock_drift(1.0, clock, delta_s, rng)
        assert abs(drifted - 1.0) <= 0.5 * stability * 3e8 * delta_s
    assert simulate_clock_drift(2.5, "Rb", 0.0, rng) == 2.5
    with pytest.raises(ValueError):
        simulate_clock_drift(0.0, "Rb", -1.0, rng)
