"""Residual normality testing and summary statistics."""

from __future__ import annotations

import warnings
from dataclasses import dataclass, field
from typing import Iterable, Mapping, Sequence

import numpy as np
from scipy import stats

COMPONENTS = ("x", "y", "z", "clock")
BENCHMARK_W = 0.9810
BENCHMARK_P_VALUE = 0.5840


@dataclass(frozen=True)
class ShapiroWilkResult:
    """Shapiro-Wilk outcome; H0 is that the sample is normally distributed."""

    w: float
    p_value: float
    reject_null: bool
    hypothesis: int
    interpretation: str


@dataclass(frozen=True)
class ResidualSummary:
    """Moments and range of a residual sample."""

    mean: float
    std: float
    variance: float
    min: float
    max: float
    count: int
    skewness: float
    kurtosis: float


@dataclass(frozen=True)
class ComponentEvaluation:
    shapiro_wilk: ShapiroWilkResult
    statistics: ResidualSummary
    residuals: np.ndarray


@dataclass(frozen=True)
class EvaluationReport:
    """Per-component and pooled normality assessment of prediction residuals."""

    by_component: Mapping[str, ComponentEvaluation]
    overall: ShapiroWilkResult
    overall_statistics: ResidualSummary
    average_w: float
    average_p_value: float
    benchmark: Mapping[str, float | int | str] = field(default_factory=dict)


def shapiro_wilk_test(data: Iterable[float], alpha: float = 0.05) -> ShapiroWilkResult:
    """Run a Shapiro-Wilk test at significance ``alpha``."""

    values = np.asarray(list(data), dtype=float)
    n = values.size
    if n < 3:
        raise ValueError("Shapiro-Wilk needs at least 3 samples.")
    if n > 5000:
        warnings.warn("Shapiro-Wilk p-values are approximate for n > 5000", stacklevel=2)
    if np.ptp(values) == 0.0:
        w, p_value = 1.0, 1.0
    else:
        with warnings.catch_warnings():
            warnings.simplefilter("ignore", UserWarning)
            result = stats.shapiro(values)
        w, p_value = float(result.statistic), float(result.pvalue)
    reject = p_value < alpha
    return ShapiroWilkResult(
        w=min(w, 1.0),
        p_value=p_value,
        reject_null=reject,
        hypothesis=1 if reject else 0,
        interpretation=(
            "Residuals are NOT normally distributed (systematic errors remain)"
            if reject
            else "Residuals are normally distributed (systematic errors removed)"
        ),
    )


def calculate_residual_stats(residuals: Iterable[float]) -> ResidualSummary:
    values = np.asarray(list(residuals), dtype=float)
    if values.size == 0:
        raise ValueError("residuals must not be empty.")
    variance = float(values.var(ddof=1)) if values.size > 1 else 0.0
    spread = np.ptp(values) > 0.0
    return ResidualSummary(
        mean=float(values.mean()),
        std=float(np.sqrt(variance)),
        variance=variance,
        min=float(values.min()),
        max=float(values.max()),
        count=int(values.size),
        skewness=float(stats.skew(values)) if spread else 0.0,
        kurtosis=float(stats.kurtosis(values)) if spread else 0.0,
    )


def evaluate_predictions(
    predictions: Sequence[Mapping[str, float]],
    actuals: Sequence[Mapping[str, float]],
    alpha: float = 0.05,
) -> EvaluationReport:
    """Evaluate x/y/z/clock prediction residuals against a normality benchmark.

    Each component is tested on its own; the pooled residuals of all four
    components give the overall verdict. The benchmark compares the mean W
    against ``BENCHMARK_W``.
    """

    if len(predictions) != len(actuals):
        raise ValueError("predictions and actuals must have the same length.")

    by_component: dict[str, ComponentEvaluation] = {}
    for comp in COMPONENTS:
        residuals = np.array(
            [float(p[comp]) - float(a[comp]) for p, a in zip(predictions, actuals)],
            dtype=float,
        )
        by_component[comp] = ComponentEvaluation(
            shapiro_wilk=shapiro_wilk_test(residuals, alpha),
            statistics=calculate_residual_stats(residuals),
            residuals=residuals,
        )

    pooled = np.concatenate([by_component[comp].residuals for comp in COMPONENTS])
    avg_w = float(np.mean([ev.shapiro_wilk.w for ev in by_component.values()]))
    avg_p = float(np.mean([ev.shapiro_wilk.p_value for ev in by_component.values()]))
    return EvaluationReport(
        by_component=by_component,
        overall=shapiro_wilk_test(pooled, alpha),
        overall_statistics=calculate_residual_stats(pooled),
        average_w=avg_w,
        average_p_value=avg_p,
        benchmark={
            "target_w": BENCHMARK_W,
            "target_p_value": BENCHMARK_P_VALUE,
            "target_hypothesis": 0,
            "comparison": "MEETS_BENCHMARK" if avg_w >= BENCHMARK_W else "BELOW_BENCHMARK",
        },
    )
