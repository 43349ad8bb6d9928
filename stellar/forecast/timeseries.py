"""Synthetic historical + forecast error series for one satellite signal."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta

import numpy as np

from stellar.catalog.characteristics import get_error_characteristics
from stellar.catalog.satellites import find_satellite, resolve_satellite
from stellar.config import StellarConfig
from stellar.models import FORECAST, HISTORICAL, SIGNALS, ForecastSeries, TimeSeriesPoint
from stellar.stats.gaussian import gaussian, resolve_rng
from stellar.utils.timefmt import as_utc, epoch_ms, iso_utc

INITIAL_SCALE = 0.5
INNOVATION_SCALE = 0.05
MEAN_REVERSION = 0.01
TREND_FACTOR = 0.001
FORECAST_NOISE_SCALE = 0.03
BASE_UNCERTAINTY_SCALE = 0.2

# Broadcast errors grow roughly linearly with ephemeris age (ns/h for clock, m/h for orbit).
CLOCK_GROWTH_PER_HOUR = 0.15
ORBIT_GROWTH_PER_HOUR = 0.08

_log = logging.getLogger(__name__)


class MeanRevertingWalk:
    """Random walk with slow pull back towards zero.

    Each step adds white noise of ``innovation_scale * base_rms`` and a
    reversion term ``-reversion * value``, i.e. a discrete AR(1) process
    with coefficient ``1 - reversion``.
    """

    def __init__(
        self,
        base_rms: float,
        initial_value: float | None = None,
        innovation_scale: float = INNOVATION_SCALE,
        reversion: float = MEAN_REVERSION,
        rng: np.random.Generator | None = None,
    ) -> None:
        self._rng = resolve_rng(rng)
        self._sigma = float(base_rms) * innovation_scale
        self._reversion = float(reversion)
        if initial_value is None:
            initial_value = gaussian(0.0, float(base_rms) * INITIAL_SCALE, self._rng)
        self._value = float(initial_value)

    @property
    def value(self) -> float:
        return self._value

    def step(self) -> float:
        innovation = gaussian(0.0, self._sigma, self._rng)
        self._value += innovation - self._reversion * self._value
        return self._value


def growth_rate(signal: str) -> float:
    return CLOCK_GROWTH_PER_HOUR if signal == "clock" else ORBIT_GROWTH_PER_HOUR


def forecast_uncertainty(base_rms: float, horizon_h: float, signal: str = "clock") -> float:
    """1-sigma forecast uncertainty at ``horizon_h`` hours ahead."""

    return base_rms * BASE_UNCERTAINTY_SCALE + horizon_h * growth_rate(signal)


def generate_forecast_data(
    satellite_id: str | None,
    signal: str = "clock",
    *,
    rng: np.random.Generator | None = None,
    now: datetime | None = None,
    config: StellarConfig | None = None,
) -> ForecastSeries:
    """Build a historical window ending at ``now`` and a forecast window after it.

    Unknown satellite ids resolve to the first reference satellite and
    unknown signals to ``"clock"``. The result is a fresh random
    realisation unless a seeded ``rng`` is supplied.
    """

    cfg = config or StellarConfig()
    rng = rng if rng is not None else cfg.make_rng()
    anchor = as_utc(now)
    step = timedelta(minutes=cfg.step_minutes)

    if find_satellite(satellite_id) is None:
        _log.debug("Unknown satellite %r, using first reference satellite", satellite_id)
    sat = resolve_satellite(satellite_id)
    if signal not in SIGNALS:
        signal = "clock"
    base_rms = get_error_characteristics(sat.constellation).signal_rms(signal)

    walk = MeanRevertingWalk(base_rms, rng=rng)
    past: list[TimeSeriesPoint] = []
    for i in range(cfg.history_points - 1, -1, -1):
        moment = anchor - i * step
        value = walk.step()
        past.append(
            TimeSeriesPoint(
                time=iso_utc(moment),
                timestamp_ms=epoch_ms(moment),
                value=value,
                type=HISTORICAL,
            )
        )
    current = walk.value

    trend = current * TREND_FACTOR
    noise_sigma = base_rms * FORECAST_NOISE_SCALE
    forecast_value = current
    forecast: list[TimeSeriesPoint] = []
    for i in range(1, cfg.forecast_points + 1):
        moment = anchor + i * step
        horizon_h = i * cfg.step_minutes / 60.0
        forecast_value += gaussian(trend, noise_sigma, rng)
        sigma = forecast_uncertainty(base_rms, horizon_h, signal)
        forecast.append(
            TimeSeriesPoint(
                time=iso_utc(moment),
                timestamp_ms=epoch_ms(moment),
                value=forecast_value,
                type=FORECAST,
                horizon_h=horizon_h,
                uncertainty=sigma,
                upper_bound=forecast_value + 2.0 * sigma,
                lower_bound=forecast_value - 2.0 * sigma,
                upper_95=forecast_value + 1.96 * sigma,
                lower_95=forecast_value - 1.96 * sigma,
                upper_68=forecast_value + sigma,
                lower_68=forecast_value - sigma,
            )
        )

    return ForecastSeries(
        satellite_id=sat.id,
        signal=signal,
        past=past,
        forecast=forecast,
        current=current,
    )
