"""KPI and bulletin aggregation."""

from stellar.report.bulletin import (
    HORIZONS,
    HorizonForecast,
    SatelliteBulletin,
    classify_risk,
    generate_bulletin_data,
    risk_counts,
)
from stellar.report.kpi import (
    MODEL_COMPARISON,
    KpiMetric,
    KpiMetrics,
    ModelBenchmark,
    ModelComparison,
    StatusCounts,
    count_statuses,
    generate_kpi_metrics,
)

__all__ = [
    "HORIZONS",
    "MODEL_COMPARISON",
    "HorizonForecast",
    "KpiMetric",
    "KpiMetrics",
    "ModelBenchmark",
    "ModelComparison",
    "SatelliteBulletin",
    "StatusCounts",
    "classify_risk",
    "count_statuses",
    "generate_bulletin_data",
    "generate_kpi_metrics",
    "risk_counts",
]
