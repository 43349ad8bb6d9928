"""Core data records produced by the synthetic generators."""

from __future__ import annotations

from dataclasses import dataclass, field

HISTORICAL = "historical"
FORECAST = "forecast"

SIGNALS = ("clock", "radial", "along", "cross")


@dataclass(frozen=True)
class TimeSeriesPoint:
    """Single sample of a historical or forecast error series."""

    time: str
    timestamp_ms: int
    value: float
    type: str = HISTORICAL
    horizon_h: float | None = None
    uncertainty: float | None = None
    upper_bound: float | None = None  # +2 sigma
    lower_bound: float | None = None
    upper_95: float | None = None
    lower_95: float | None = None
    upper_68: float | None = None
    lower_68: float | None = None


@dataclass(frozen=True)
class ForecastSeries:
    """Historical window, forecast window and the last observed value."""

    satellite_id: str
    signal: str
    past: list[TimeSeriesPoint] = field(default_factory=list)
    forecast: list[TimeSeriesPoint] = field(default_factory=list)
    current: float = 0.0


@dataclass(frozen=True)
class HistogramBin:
    """Equal-width histogram bin ``[x0, x1)``."""

    x0: float
    x1: float
    count: int


@dataclass(frozen=True)
class QQPoint:
    """Theoretical normal quantile paired with an observed residual."""

    theoretical: float
    actual: float


@dataclass(frozen=True)
class OrbitError:
    """Broadcast orbit error components in metres."""

    radial: float
    along: float
    cross: float
