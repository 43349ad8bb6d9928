"""Synthetic GNSS clock/orbit error forecast package."""

from stellar.config import StellarConfig

__all__ = [
    "StellarConfig",
    "catalog",
    "forecast",
    "report",
    "stats",
    "utils",
]
