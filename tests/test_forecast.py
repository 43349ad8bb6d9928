from __future__ import annotations

from datetime import datetime, timezone

import numpy as np
import pytest

from stellar.catalog import CONSTELLATIONS, satellites_by_constellation
from stellar.config import StellarConfig
from stellar.forecast import MeanRevertingWalk, forecast_uncertainty, generate_forecast_data

STEP_MS = 15 * 60 * 1000


@pytest.mark.parametrize("constellation", CONSTELLATIONS)
def test_forecast_windows_for_every_constellation(constellation: str, fixed_now: datetime) -> None:
    sat = satellites_by_constellation(constellation)[0]
    series = generate_forecast_data(sat.id, "clock", now=fixed_now)

    assert series.satellite_id == sat.id
    assert len(series.past) == 96
    assert len(series.forecast) == 96
    stamps = [p.timestamp_ms for p in [*series.past, *series.forecast]]
    assert all(b - a == STEP_MS for a, b in zip(stamps, stamps[1:]))
    assert {p.type for p in series.past} == {"historical"}
    assert {p.type for p in series.forecast} == {"forecast"}


def test_windows_are_anchored_on_now(fixed_now: datetime) -> None:
    series = generate_forecast_data("G01", now=fixed_now)
    now_ms = int(fixed_now.timestamp() * 1000)

    assert series.past[-1].timestamp_ms == now_ms
    assert series.past[-1].time == "2024-06-01T12:00:00.000Z"
    assert series.forecast[0].timestamp_ms == now_ms + STEP_MS
    assert series.current == series.past[-1].value


@pytest.mark.parametrize("signal", ["clock", "radial", "along", "cross"])
def test_uncertainty_non_decreasing(signal: str) -> None:
    series = generate_forecast_data("E07", signal)
    sigmas = [p.uncertainty for p in series.forecast]
    assert all(b >= a for a, b in zip(sigmas, sigmas[1:]))


def test_gps_clock_uncertainty_growth() -> None:
    series = generate_forecast_data("G01", "clock")
    by_horizon = {p.horizon_h: p.uncertainty for p in series.forecast}

    assert by_horizon[0.25] == pytest.approx(1.0 + 0.25 * 0.15)
    assert by_horizon[6.0] == pytest.approx(1.9)
    assert by_horizon[24.0] == pytest.approx(1.0 + 24 * 0.15)
    assert forecast_uncertainty(5.0, 0.0) == pytest.approx(1.0)


def test_orbit_signal_uses_orbit_growth() -> None:
    series = generate_forecast_data("G01", "along")
    last = series.forecast[-1]
    assert last.uncertainty == pytest.approx(2.5 * 0.2 + 24 * 0.08)


def test_bands_bracket_forecast_value() -> None:
    point = generate_forecast_data("R01", "radial").forecast[10]
    sigma = point.uncertainty
    assert point.upper_68 - point.value == pytest.approx(sigma)
    assert point.value - point.lower_95 == pytest.approx(1.96 * sigma)
    assert point.upper_bound - point.lower_bound == pytest.approx(4.0 * sigma)


def test_unknown_satellite_and_signal_fall_back() -> None:
    series = generate_forecast_data("Z42", "doppler")
    assert series.satellite_id == "G01"
    assert series.signal == "clock"
    assert series.forecast[0].uncertainty == pytest.approx(1.0 + 0.25 * 0.15)


def test_seeded_forecast_is_reproducible(fixed_now: datetime) -> None:
    a = generate_forecast_data("C20", "cross", rng=np.random.default_rng(11), now=fixed_now)
    b = generate_forecast_data("C20", "cross", rng=np.random.default_rng(11), now=fixed_now)
    c = generate_forecast_data("C20", "cross", config=StellarConfig(rng_seed=11), now=fixed_now)

    assert a == b
    assert a == c


def test_unseeded_forecasts_differ() -> None:
    a = generate_forecast_data("G01")
    b = generate_forecast_data("G01")
    assert [p.value for p in a.past] != [p.value for p in b.past]


def test_config_controls_window_lengths() -> None:
    cfg = StellarConfig(history_points=8, forecast_points=4, step_minutes=60.0)
    series = generate_forecast_data("G01", config=cfg, now=datetime(2024, 1, 1, tzinfo=timezone.utc))
    assert len(series.past) == 8
    assert [p.horizon_h for p in series.forecast] == [1.0, 2.0, 3.0, 4.0]


def test_mean_reverting_walk_stays_bounded(rng: np.random.Generator) -> None:
    walk = MeanRevertingWalk(base_rms=5.0, initial_value=0.0, rng=rng)
    values = np.array([walk.step() for _ in range(20_000)])
    # Stationary std of AR(1) with phi=0.99 and innovation 0.25 is about 1.77.
    assert 1.0 < values[5000:].std() < 2.6
    assert walk.value == values[-1]
