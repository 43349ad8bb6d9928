"""Plotting utilities for export run outputs."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

import matplotlib
import numpy as np

from stellar.models import ForecastSeries, HistogramBin, QQPoint
from stellar.stats.residuals import create_histogram, generate_qq_data

matplotlib.use("Agg", force=True)
import matplotlib.pyplot as plt  # noqa: E402

_UNITS = {"clock": "ns", "radial": "m", "along": "m", "cross": "m"}


def save_run_plots(
    series: ForecastSeries,
    residuals: Sequence[float],
    *,
    out_dir: str | Path,
    num_bins: int = 30,
) -> Path:
    """Save forecast, histogram and Q-Q plots into ``out_dir``."""

    output_dir = Path(out_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    plot_forecast(series, output_dir / "forecast.png")
    plot_histogram(create_histogram(residuals, num_bins), output_dir / "residual_histogram.png")
    plot_qq(generate_qq_data(residuals), output_dir / "qq_plot.png")
    return output_dir


def plot_forecast(series: ForecastSeries, path: str | Path) -> None:
    past_t = _hours_from_now(series.past, series)
    fc_t = _hours_from_now(series.forecast, series)
    past_v = np.array([p.value for p in series.past], dtype=float)
    fc_v = np.array([p.value for p in series.forecast], dtype=float)
    lo95 = np.array([p.lower_95 for p in series.forecast], dtype=float)
    hi95 = np.array([p.upper_95 for p in series.forecast], dtype=float)
    lo68 = np.array([p.lower_68 for p in series.forecast], dtype=float)
    hi68 = np.array([p.upper_68 for p in series.forecast], dtype=float)

    fig, ax = plt.subplots(figsize=(9, 4))
    ax.plot(past_t, past_v, color="tab:blue", label="Historical")
    ax.plot(fc_t, fc_v, color="tab:orange", label="Forecast")
    ax.fill_between(fc_t, lo95, hi95, color="tab:orange", alpha=0.15, label="95% band")
    ax.fill_between(fc_t, lo68, hi68, color="tab:orange", alpha=0.3, label="68% band")
    ax.axvline(0.0, color="tab:gray", linestyle="--", linewidth=1.0)
    ax.set_title(f"{series.satellite_id} {series.signal} error forecast")
    ax.set_xlabel("Time from now (h)")
    ax.set_ylabel(f"Error ({_UNITS.get(series.signal, 'ns')})")
    ax.grid(True, alpha=0.3)
    ax.legend(loc="best")
    fig.tight_layout()
    fig.savefig(path, dpi=150)
    plt.close(fig)


def plot_histogram(bins: Sequence[HistogramBin], path: str | Path) -> None:
    fig, ax = plt.subplots(figsize=(7, 4))
    if bins:
        lefts = np.array([b.x0 for b in bins], dtype=float)
        widths = np.array([b.x1 - b.x0 for b in bins], dtype=float)
        counts = np.array([b.count for b in bins], dtype=float)
        ax.bar(lefts, counts, width=np.where(widths > 0.0, widths, 1e-3), align="edge",
               color="tab:green", edgecolor="white")
    ax.set_title("Residual Distribution")
    ax.set_xlabel("Residual (ns)")
    ax.set_ylabel("Count")
    ax.grid(True, alpha=0.3)
    fig.tight_layout()
    fig.savefig(path, dpi=150)
    plt.close(fig)


def plot_qq(points: Sequence[QQPoint], path: str | Path) -> None:
    theoretical = np.array([p.theoretical for p in points], dtype=float)
    actual = np.array([p.actual for p in points], dtype=float)
    fig, ax = plt.subplots(figsize=(5, 5))
    ax.scatter(theoretical, actual, s=6, color="tab:purple")
    if actual.size > 1:
        slope, intercept = np.polyfit(theoretical, actual, 1)
        ax.plot(theoretical, slope * theoretical + intercept, color="tab:gray", linestyle="--")
    ax.set_title("Normal Q-Q Plot")
    ax.set_xlabel("Theoretical quantile")
    ax.set_ylabel("Residual (ns)")
    ax.grid(True, alpha=0.3)
    fig.tight_layout()
    fig.savefig(path, dpi=150)
    plt.close(fig)


def _hours_from_now(points: Sequence, series: ForecastSeries) -> np.ndarray:
    anchor_ms = series.past[-1].timestamp_ms if series.past else 0
    return np.array([(p.timestamp_ms - anchor_ms) / 3_600_000.0 for p in points], dtype=float)
