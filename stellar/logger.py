"""CSV/JSON export of generated series, residuals, bulletins and KPIs."""

from __future__ import annotations

import csv
import json
from dataclasses import asdict
from pathlib import Path
from typing import Iterable, Sequence

import numpy as np

from stellar.models import ForecastSeries, TimeSeriesPoint
from stellar.report.bulletin import SatelliteBulletin
from stellar.report.kpi import KpiMetrics

FORECAST_CSV_COLUMNS = [
    "time",
    "timestamp_ms",
    "type",
    "value",
    "horizon_h",
    "uncertainty",
    "lower_68",
    "upper_68",
    "lower_95",
    "upper_95",
    "lower_bound",
    "upper_bound",
]

BULLETIN_CSV_COLUMNS = [
    "satellite_id",
    "satellite_name",
    "constellation",
    "orbit",
    "clock_type",
    "status",
    "horizon",
    "predicted_mean_ns",
    "uncertainty_ns",
    "confidence95_lower_ns",
    "confidence95_upper_ns",
    "risk_level",
    "generated_at",
    "valid_until",
]

RESIDUAL_CSV_COLUMNS = ["index", "residual"]


def save_forecast_csv(path: str | Path, series: ForecastSeries) -> None:
    """Save the historical and forecast windows of a series, oldest first."""

    target = Path(path)
    with target.open("w", encoding="utf-8") as handle:
        handle.write(_header(FORECAST_CSV_COLUMNS))
        for point in [*series.past, *series.forecast]:
            handle.write(_point_to_csv_line(point))


def save_residuals_csv(path: str | Path, residuals: Iterable[float]) -> None:
    target = Path(path)
    with target.open("w", encoding="utf-8") as handle:
        handle.write(_header(RESIDUAL_CSV_COLUMNS))
        for idx, value in enumerate(residuals):
            handle.write(f"{idx},{_format_value(float(value))}\n")


def load_residuals_csv(path: str | Path) -> np.ndarray:
    """Read back the ``residual`` column written by :func:`save_residuals_csv`.

    Blank cells are skipped.
    """

    with Path(path).open("r", encoding="utf-8", newline="") as handle:
        reader = csv.DictReader(handle)
        if reader.fieldnames is None or "residual" not in reader.fieldnames:
            raise ValueError(f"{path} has no 'residual' column.")
        values = [float(row["residual"]) for row in reader if row["residual"]]
    return np.asarray(values, dtype=float)


def save_bulletin_csv(path: str | Path, bulletins: Sequence[SatelliteBulletin]) -> None:
    """Save one row per satellite and horizon with values rounded to 4 decimals."""

    target = Path(path)
    with target.open("w", encoding="utf-8", newline="") as handle:
        writer = csv.writer(handle, lineterminator="\n")
        writer.writerow(BULLETIN_CSV_COLUMNS)
        for bulletin in bulletins:
            for forecast in bulletin.forecasts:
                writer.writerow([
                    bulletin.satellite_id,
                    bulletin.satellite_name,
                    bulletin.constellation,
                    bulletin.orbit,
                    bulletin.clock_type,
                    bulletin.status,
                    forecast.horizon,
                    _format_fixed(forecast.predicted_mean),
                    _format_fixed(forecast.uncertainty),
                    _format_fixed(forecast.confidence95_lower),
                    _format_fixed(forecast.confidence95_upper),
                    forecast.risk_level,
                    bulletin.generated_at,
                    bulletin.valid_until,
                ])


def save_bulletin_json(path: str | Path, bulletins: Sequence[SatelliteBulletin]) -> None:
    payload = [asdict(bulletin) for bulletin in bulletins]
    Path(path).write_text(json.dumps(payload, indent=2), encoding="utf-8")


def save_kpi_json(path: str | Path, metrics: KpiMetrics) -> None:
    Path(path).write_text(json.dumps(asdict(metrics), indent=2), encoding="utf-8")


def _header(columns: list[str]) -> str:
    return ",".join(columns) + "\n"


def _point_to_csv_line(point: TimeSeriesPoint) -> str:
    row = [
        point.time,
        point.timestamp_ms,
        point.type,
        _format_value(point.value),
        _format_value(point.horizon_h),
        _format_value(point.uncertainty),
        _format_value(point.lower_68),
        _format_value(point.upper_68),
        _format_value(point.lower_95),
        _format_value(point.upper_95),
        _format_value(point.lower_bound),
        _format_value(point.upper_bound),
    ]
    return ",".join(str(value) for value in row) + "\n"


def _format_fixed(value: float) -> str:
    return f"{value:.4f}"


def _format_value(value: float | int | None) -> str:
    if value is None:
        return ""
    return repr(float(value))
