"""stats subpackage."""
"""Random sampling and residual statistics."""

from stellar.stats.gaussian import gaussian, gaussian_array, resolve_rng
from stellar.stats.normality import (
    EvaluationReport,
    ResidualSummary,
    ShapiroWilkResult,
    calculate_residual_stats,
    evaluate_predictions,
    shapiro_wilk_test,
)
from stellar.stats.residuals import create_histogram, erf_inv, generate_qq_data, generate_residual_data
from stellar.stats.sampling import sample_clock_error, sample_orbit_error, simulate_clock_drift

__all__ = [
    "EvaluationReport",
    "ResidualSummary",
    "ShapiroWilkResult",
    "calculate_residual_stats",
    "create_histogram",
    "erf_inv",
    "evaluate_predictions",
    "gaussian",
    "gaussian_array",
    "generate_qq_data",
    "generate_residual_data",
    "resolve_rng",
    "sample_clock_error",
    "sample_orbit_error",
    "shapiro_wilk_test",
    "simulate_clock_drift",
]
