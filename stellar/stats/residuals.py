"""Synthetic prediction residuals and their distributional views."""

from __future__ import annotations

import logging
import math
from typing import Iterable

import numpy as np

from stellar.models import HistogramBin, QQPoint
from stellar.stats.gaussian import gaussian_array, resolve_rng

RESIDUAL_SCALE = 0.25
HEAVY_TAIL_PROB = 0.02
HEAVY_TAIL_HALF_WIDTH = 0.4

# Winitzki (2008) constant for the closed-form inverse error function.
ERF_INV_A = 0.147
ERF_INV_CLAMP = 3.0

_log = logging.getLogger(__name__)


def generate_residual_data(n: int = 500, rng: np.random.Generator | None = None) -> np.ndarray:
    """Return ``n`` near-Gaussian residuals with a light heavy-tail contamination.

    Each sample is ``0.25 * z``; with probability 0.02 an extra
    ``U(-0.4, 0.4)`` term is added.
    """

    if isinstance(n, bool) or int(n) != n:
        raise ValueError("n must be an integer.")
    n = int(n)
    if n < 0:
        raise ValueError("n must be non-negative.")
    rng = resolve_rng(rng)
    scaled = gaussian_array(n, rng=rng) * RESIDUAL_SCALE
    contaminated = rng.random(n) < HEAVY_TAIL_PROB
    heavy_tail = (rng.random(n) - 0.5) * (2.0 * HEAVY_TAIL_HALF_WIDTH)
    return scaled + np.where(contaminated, heavy_tail, 0.0)


def create_histogram(data: Iterable[float], num_bins: int = 30) -> list[HistogramBin]:
    """Bin ``data`` into ``num_bins`` equal-width bins spanning [min, max].

    The top edge is folded into the last bin. Constant data yields a single
    bin holding every point; empty data yields no bins.
    """

    if num_bins < 1:
        raise ValueError("num_bins must be at least 1.")
    values = np.asarray(list(data), dtype=float)
    if values.size == 0:
        return []
    lo = float(values.min())
    hi = float(values.max())
    width = (hi - lo) / num_bins
    if width == 0.0:
        return [HistogramBin(x0=lo, x1=hi, count=int(values.size))]

    idx = np.floor((values - lo) / width).astype(int)
    idx = np.clip(idx, 0, num_bins - 1)
    counts = np.bincount(idx, minlength=num_bins)
    return [
        HistogramBin(x0=lo + i * width, x1=lo + (i + 1) * width, count=int(counts[i]))
        for i in range(num_bins)
    ]


def erf_inv(x: float) -> float:
    """Approximate inverse error function.

    Uses Winitzki's closed form; inputs at or beyond +/-1 (and any other
    non-finite result) clamp to +/-3.
    """

    sign = -1.0 if x < 0 else 1.0
    x = abs(float(x))
    one_minus_sq = 1.0 - x * x
    if one_minus_sq <= 0.0 or math.isnan(one_minus_sq):
        _log.debug("erf_inv clamped at x=%s", x)
        return sign * ERF_INV_CLAMP
    ln = math.log(one_minus_sq)
    p1 = 2.0 / (math.pi * ERF_INV_A) + ln / 2.0
    inner = max(math.sqrt(p1 * p1 - ln / ERF_INV_A) - p1, 0.0)
    result = sign * math.sqrt(inner)
    if not math.isfinite(result):
        return sign * ERF_INV_CLAMP
    return result


def generate_qq_data(residuals: Iterable[float]) -> list[QQPoint]:
    """Pair sorted residuals with standard-normal plotting-position quantiles."""

    ordered = np.sort(np.asarray(list(residuals), dtype=float))
    n = ordered.size
    points: list[QQPoint] = []
    for i, value in enumerate(ordered):
        p = (i + 0.5) / n
        theoretical = math.sqrt(2.0) * erf_inv(2.0 * p - 1.0)
        points.append(QQPoint(theoretical=theoretical, actual=float(value)))
    return points
