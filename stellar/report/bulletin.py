"""Per-satellite multi-horizon clock forecast bulletins."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Sequence

import numpy as np

from stellar.catalog.characteristics import get_error_characteristics
from stellar.catalog.satellites import SATELLITES, Satellite
from stellar.config import StellarConfig
from stellar.forecast.timeseries import BASE_UNCERTAINTY_SCALE
from stellar.stats.sampling import sample_clock_error
from stellar.utils.timefmt import as_utc, iso_utc

HORIZON_LABELS = ("15m", "30m", "1h", "2h", "4h", "6h", "12h", "24h")
HORIZON_MINUTES = (15, 30, 60, 120, 240, 360, 720, 1440)
HORIZONS = tuple(zip(HORIZON_LABELS, HORIZON_MINUTES))

RISK_HIGH = "HIGH"
RISK_MEDIUM = "MEDIUM"
RISK_LOW = "LOW"
HIGH_UNCERTAINTY = 0.8
MEDIUM_UNCERTAINTY = 0.4

DATA_SOURCE = "STELLAR-v1k forecast engine"


@dataclass(frozen=True)
class HorizonForecast:
    horizon: str
    horizon_h: float
    predicted_mean: float
    uncertainty: float
    confidence95_lower: float
    confidence95_upper: float
    risk_level: str


@dataclass(frozen=True)
class SatelliteBulletin:
    """Forecast bulletin entry for one satellite."""

    satellite_id: str
    satellite_name: str
    constellation: str
    orbit: str
    clock_type: str
    status: str
    forecasts: list[HorizonForecast] = field(default_factory=list)
    generated_at: str = ""
    valid_until: str = ""
    data_source: str = DATA_SOURCE


def classify_risk(uncertainty: float) -> str:
    """Map a 1-sigma uncertainty (ns) onto HIGH / MEDIUM / LOW."""

    if uncertainty > HIGH_UNCERTAINTY:
        return RISK_HIGH
    if uncertainty > MEDIUM_UNCERTAINTY:
        return RISK_MEDIUM
    return RISK_LOW


def _horizon_forecast(
    sat: Satellite,
    label: str,
    minutes: int,
    growth_per_hour: float,
    rng: np.random.Generator,
) -> HorizonForecast:
    horizon_h = minutes / 60.0
    clock_rms = get_error_characteristics(sat.constellation).broadcast_clock_rms
    mean = sample_clock_error(sat.constellation, sat.clock_type, rng)
    uncertainty = clock_rms * BASE_UNCERTAINTY_SCALE + horizon_h * growth_per_hour
    return HorizonForecast(
        horizon=label,
        horizon_h=horizon_h,
        predicted_mean=mean,
        uncertainty=uncertainty,
        confidence95_lower=mean - 1.96 * uncertainty,
        confidence95_upper=mean + 1.96 * uncertainty,
        risk_level=classify_risk(uncertainty),
    )


def generate_bulletin_data(
    *,
    rng: np.random.Generator | None = None,
    now: datetime | None = None,
    config: StellarConfig | None = None,
    satellites: Sequence[Satellite] = SATELLITES,
) -> list[SatelliteBulletin]:
    """Return one bulletin per satellite covering every entry of ``HORIZONS``."""

    cfg = config or StellarConfig()
    rng = rng if rng is not None else cfg.make_rng()
    anchor = as_utc(now)
    generated_at = iso_utc(anchor)
    valid_until = iso_utc(anchor + timedelta(hours=cfg.bulletin_validity_hours))

    bulletins: list[SatelliteBulletin] = []
    for sat in satellites:
        forecasts = [
            _horizon_forecast(sat, label, minutes, cfg.bulletin_growth_per_hour, rng)
            for label, minutes in HORIZONS
        ]
        bulletins.append(
            SatelliteBulletin(
                satellite_id=sat.id,
                satellite_name=sat.name,
                constellation=sat.constellation,
                orbit=sat.orbit,
                clock_type=sat.clock_type,
                status=sat.status,
                forecasts=forecasts,
                generated_at=generated_at,
                valid_until=valid_until,
            )
        )
    return bulletins


def risk_counts(bulletins: Sequence[SatelliteBulletin]) -> dict[str, int]:
    counts = {RISK_HIGH: 0, RISK_MEDIUM: 0, RISK_LOW: 0}
    for bulletin in bulletins:
        for forecast in bulletin.forecasts:
            counts[forecast.risk_level] += 1
    return counts
