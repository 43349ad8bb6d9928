"""Forecast series generation."""

from stellar.forecast.timeseries import (
    MeanRevertingWalk,
    forecast_uncertainty,
    generate_forecast_data,
    growth_rate,
)

__all__ = ["MeanRevertingWalk", "forecast_uncertainty", "generate_forecast_data", "growth_rate"]
