import numpy as np
import pytest

from stellar.stats.normality import calculate_residual_stats, evaluate_predictions, shapiro_wilk_test


def test_shapiro_wilk_near_one_for_gaussian_sample(rng: np.random.Generator) -> None:
    result = shapiro_wilk_test(rng.normal(0.0, 0.25, size=500))
    assert 0.98 < result.w <= 1.0
    assert 0.0 <= result.p_value <= 1.0
    assert result.hypothesis == int(result.reject_null)


def test_shapiro_wilk_rejects_skewed_sample(rng: np.random.Generator) -> None:
    result = shapiro_wilk_test(rng.exponential(1.0, size=2000))
    assert result.reject_null
    assert result.hypothesis == 1
    assert "NOT" in result.interpretation


def test_shapiro_wilk_constant_and_short_input() -> None:
    result = shapiro_wilk_test([2.0, 2.0, 2.0, 2.0])
    assert result.w == 1.0
    assert result.p_value == 1.0
    assert not result.reject_null
    with pytest.raises(ValueError):
        shapiro_wilk_test([1.0, 2.0])


def test_residual_stats() -> None:
    summary = calculate_residual_stats([1.0, 2.0, 3.0, 4.0])
    assert summary.mean == pytest.approx(2.5)
    assert summary.variance == pytest.approx(5.0 / 3.0)
    assert summary.std == pytest.approx(np.sqrt(5.0 / 3.0))
    assert (summary.min, summary.max, summary.count) == (1.0, 4.0, 4)
    assert summary.skewness == pytest.approx(0.0)
    with pytest.raises(ValueError):
        calculate_residual_stats([])


def test_evaluate_predictions_report(rng: np.random.Generator) -> None:
    n = 200
    actuals = [{"x": 0.0, "y": 0.0, "z": 0.0, "clock": 0.0} for _ in range(n)]
    predictions = [
        {comp: float(rng.normal(0.0, 0.1)) for comp in ("x", "y", "z", "clock")} for _ in range(n)
    ]

    report = evaluate_predictions(predictions, actuals)

    assert set(report.by_component) == {"x", "y", "z", "clock"}
    assert report.overall_statistics.count == 4 * n
    assert report.average_w == pytest.approx(
        np.mean([ev.shapiro_wilk.w for ev in report.by_component.values()])
    )
    assert report.benchmark["comparison"] in {"MEETS_BENCHMARK", "BELOW_BENCHMARK"}
    assert report.benchmark["target_w"] == 0.9810


def test_evaluate_predictions_length_mismatch() -> None:
    with pytest.raises(ValueError):
        evaluate_predictions([{"x": 0, "y": 0, "z": 0, "clock": 0}], [])
